# cli/utils.py
from functools import wraps
import logging

import click

from bookstore.errors import CatalogError, NotFoundError
from bookstore.sa.database import Database
from bookstore.sa.models import Author, Book, Genre

logger = logging.getLogger(__name__)


def pass_database(f):
    """Inject the Database built by the root group as the first argument"""
    @click.pass_context
    @wraps(f)
    def wrapper(ctx, *args, **kwargs):
        db: Database = ctx.obj["db"]
        return f(db, *args, **kwargs)
    return wrapper


def handle_catalog_errors(f):
    """Turn service failures into a non-zero exit with a readable message"""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except NotFoundError as e:
            raise click.ClickException(e.message) from e
        except CatalogError as e:
            logger.debug("Command failed: %s", e.to_dict())
            raise click.ClickException(f"{e.kind}: {e.message}") from e
    return wrapper


def format_author(author: Author) -> str:
    return (click.style(f"[{author.id}] ", fg='blue') +
            click.style(author.name, fg='cyan'))


def format_book(book: Book) -> str:
    genres = ", ".join(sorted(genre.name for genre in book.genres))
    line = (click.style(f"[{book.id}] ", fg='blue') +
            click.style(book.title, fg='cyan') +
            f" (isbn {book.isbn}, {book.page_count} pages, author {book.author.name})")
    if genres:
        line += click.style(f" [{genres}]", fg='green')
    return line


def format_genre(genre: Genre) -> str:
    return (click.style(f"[{genre.id}] ", fg='blue') +
            click.style(genre.name, fg='cyan') +
            f" ({len(genre.books)} books)")
