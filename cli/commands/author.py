import click

from bookstore.models import AuthorCreate, AuthorUpdate, BookBase, parse_input
from bookstore.sa.database import Database
from bookstore.services import AuthorService
from ..utils import pass_database, handle_catalog_errors, format_author, format_book


@click.group()
def author():
    """Author management commands"""
    pass


@author.command(name="list")
@click.option('--name', default=None, help='Only show authors whose name contains this text')
@pass_database
@handle_catalog_errors
def list_authors(db: Database, name: str):
    """List authors"""
    with db.get_db() as session:
        authors = AuthorService(session).list_authors(name)
        if not authors:
            click.echo("No authors found.")
        for a in authors:
            click.echo(format_author(a))


@author.command()
@click.argument('name')
@click.option('--bio', default=None, help='Author biography')
@pass_database
@handle_catalog_errors
def add(db: Database, name: str, bio: str):
    """Create an author called NAME"""
    data = parse_input(AuthorCreate, {"name": name, "biography": bio})
    with db.get_db() as session:
        created = AuthorService(session).create_author(data)
        click.echo(click.style("Created ", fg='green') + format_author(created))


@author.command()
@click.argument('author_id', type=int)
@click.option('--name', default=None, help='New name')
@pass_database
@handle_catalog_errors
def update(db: Database, author_id: int, name: str):
    """Rename an author"""
    patch = parse_input(AuthorUpdate, {"name": name} if name is not None else {})
    with db.get_db() as session:
        updated = AuthorService(session).update_author(author_id, patch)
        click.echo(click.style("Updated ", fg='green') + format_author(updated))


@author.command()
@click.argument('author_id', type=int)
@pass_database
@handle_catalog_errors
def delete(db: Database, author_id: int):
    """Delete an author and every book they own"""
    with db.get_db() as session:
        removed = AuthorService(session).delete_author(author_id)
    click.echo(click.style(f"Deleted author {author_id} and {removed} book(s)", fg='green'))


@author.command()
@click.argument('author_id', type=int)
@pass_database
@handle_catalog_errors
def books(db: Database, author_id: int):
    """List the books owned by an author"""
    with db.get_db() as session:
        owned = AuthorService(session).list_books_by_author(author_id)
        if not owned:
            click.echo(f"Author {author_id} has no books.")
        for b in owned:
            click.echo(format_book(b))


@author.command(name="add-book")
@click.argument('author_id', type=int)
@click.argument('title')
@click.argument('isbn')
@click.option('--pages', default=0, type=int, help='Page count')
@pass_database
@handle_catalog_errors
def add_book(db: Database, author_id: int, title: str, isbn: str, pages: int):
    """Create a book owned by AUTHOR_ID"""
    data = parse_input(BookBase, {"title": title, "isbn": isbn, "page_count": pages})
    with db.get_db() as session:
        created = AuthorService(session).add_book_to_author(author_id, data)
        click.echo(click.style("Created ", fg='green') + format_book(created))
