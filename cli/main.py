# cli/main.py
import click

from bookstore.config import configure_logging
from bookstore.sa.database import Database
from .commands.author import author
from .commands.book import book
from .commands.genre import genre
from .utils import pass_database


@click.group()
@click.option('--db', 'db_url', default=None, envvar='DATABASE_URL',
              help='Database URL (defaults to sqlite:///bookstore.db)')
@click.option('--log-level', default=None, help='Logging level (defaults to LOG_LEVEL or INFO)')
@click.pass_context
def cli(ctx, db_url, log_level):
    """Bookstore catalog CLI"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["db"] = Database(db_url)


@cli.command(name="init-db")
@pass_database
def init_db(db: Database):
    """Create the catalog tables"""
    db.init_db()
    click.echo(click.style("Database initialized", fg='green'))


@cli.command()
@click.option('--host', default="127.0.0.1", help='Interface to bind')
@click.option('--port', default=8000, type=int, help='Port to listen on')
@click.option('--reload/--no-reload', default=False, help='Reload on code changes')
def serve(host: str, port: int, reload: bool):
    """Run the REST API"""
    import uvicorn
    uvicorn.run("api.main:app", host=host, port=port, reload=reload)


cli.add_command(author)
cli.add_command(book)
cli.add_command(genre)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
