import click

from bookstore.models import BookCreate, BookUpdate, parse_input
from bookstore.sa.database import Database
from bookstore.services import BookService
from ..utils import pass_database, handle_catalog_errors, format_book


@click.group()
def book():
    """Book management commands"""
    pass


@book.command(name="list")
@click.option('--title', default=None, help='Case-insensitive title search')
@pass_database
@handle_catalog_errors
def list_books(db: Database, title: str):
    """List books, optionally filtered by title"""
    with db.get_db() as session:
        service = BookService(session)
        found = service.search_books(title) if title else service.list_books()
        if not found:
            click.echo("No books found.")
        for b in found:
            click.echo(format_book(b))


@book.command()
@click.argument('book_id', type=int)
@pass_database
@handle_catalog_errors
def show(db: Database, book_id: int):
    """Show a single book"""
    with db.get_db() as session:
        click.echo(format_book(BookService(session).get_book(book_id)))


@book.command()
@click.argument('author_id', type=int)
@click.argument('title')
@click.argument('isbn')
@click.option('--pages', default=0, type=int, help='Page count')
@pass_database
@handle_catalog_errors
def add(db: Database, author_id: int, title: str, isbn: str, pages: int):
    """Create a book for AUTHOR_ID"""
    data = parse_input(BookCreate, {
        "author_id": author_id, "title": title, "isbn": isbn, "page_count": pages
    })
    with db.get_db() as session:
        created = BookService(session).create_book(data)
        click.echo(click.style("Created ", fg='green') + format_book(created))


@book.command()
@click.argument('book_id', type=int)
@click.option('--title', default=None)
@click.option('--isbn', default=None)
@click.option('--pages', default=None, type=int)
@pass_database
@handle_catalog_errors
def update(db: Database, book_id: int, title: str, isbn: str, pages: int):
    """Change title, isbn or page count of a book"""
    changes = {"title": title, "isbn": isbn, "page_count": pages}
    patch = parse_input(BookUpdate, {k: v for k, v in changes.items() if v is not None})
    with db.get_db() as session:
        updated = BookService(session).update_book(book_id, patch)
        click.echo(click.style("Updated ", fg='green') + format_book(updated))


@book.command()
@click.argument('book_id', type=int)
@pass_database
@handle_catalog_errors
def delete(db: Database, book_id: int):
    """Delete a book"""
    with db.get_db() as session:
        BookService(session).delete_book(book_id)
    click.echo(click.style(f"Deleted book {book_id}", fg='green'))


@book.command(name="attach-genre")
@click.argument('book_id', type=int)
@click.argument('genre_id', type=int)
@pass_database
@handle_catalog_errors
def attach_genre(db: Database, book_id: int, genre_id: int):
    """Tag a book with a genre"""
    with db.get_db() as session:
        click.echo(format_book(BookService(session).attach_genre(book_id, genre_id)))


@book.command(name="detach-genre")
@click.argument('book_id', type=int)
@click.argument('genre_id', type=int)
@pass_database
@handle_catalog_errors
def detach_genre(db: Database, book_id: int, genre_id: int):
    """Remove a genre from a book"""
    with db.get_db() as session:
        click.echo(format_book(BookService(session).detach_genre(book_id, genre_id)))
