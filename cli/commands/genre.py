import click

from bookstore.models import GenreCreate, GenreUpdate, parse_input
from bookstore.sa.database import Database
from bookstore.services import GenreService
from ..utils import pass_database, handle_catalog_errors, format_genre


@click.group()
def genre():
    """Genre management commands"""
    pass


@genre.command(name="list")
@click.option('--name', default=None, help='Only show genres whose name contains this text')
@pass_database
@handle_catalog_errors
def list_genres(db: Database, name: str):
    """List genres with their book counts"""
    with db.get_db() as session:
        genres = GenreService(session).list_genres(name)
        if not genres:
            click.echo("No genres found.")
        for g in genres:
            click.echo(format_genre(g))


@genre.command()
@click.argument('name')
@pass_database
@handle_catalog_errors
def add(db: Database, name: str):
    """Create a genre called NAME"""
    data = parse_input(GenreCreate, {"name": name})
    with db.get_db() as session:
        created = GenreService(session).create_genre(data)
        click.echo(click.style("Created ", fg='green') + format_genre(created))


@genre.command()
@click.argument('genre_id', type=int)
@click.option('--name', default=None, help='New name')
@pass_database
@handle_catalog_errors
def update(db: Database, genre_id: int, name: str):
    """Rename a genre"""
    patch = parse_input(GenreUpdate, {"name": name} if name is not None else {})
    with db.get_db() as session:
        updated = GenreService(session).update_genre(genre_id, patch)
        click.echo(click.style("Updated ", fg='green') + format_genre(updated))


@genre.command()
@click.argument('genre_id', type=int)
@pass_database
@handle_catalog_errors
def delete(db: Database, genre_id: int):
    """Delete a genre; its books are kept"""
    with db.get_db() as session:
        GenreService(session).delete_genre(genre_id)
    click.echo(click.style(f"Deleted genre {genre_id}", fg='green'))
