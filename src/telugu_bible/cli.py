"""
Command-line interface for the Telugu Bible API.

Usage:
    telugu-bible health [--base-url URL]
    telugu-bible books [--base-url URL]
    telugu-bible read BOOK [CHAPTER] [VERSE] [--base-url URL]
    telugu-bible server [--host HOST] [--port PORT] [--reload] [--workers N]
"""

import json
import logging

import click
import requests

from telugu_bible.helpers.client import get_passage, health_check, list_books
from telugu_bible.constants import TELUGU_BIBLE_SERVER_DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

BASE_URL_HELP = f"Server base URL (default: env TELUGU_BIBLE_API_URL or {TELUGU_BIBLE_SERVER_DEFAULT_BASE_URL})"


def _error_message(e: Exception) -> str:
    if isinstance(e, requests.HTTPError) and e.response is not None:
        try:
            return e.response.json().get("error", str(e))
        except ValueError:
            return str(e)
    return str(e)


@click.group()
@click.version_option()
def cli():
    """Telugu Bible - read books, chapters and verses of the Telugu Bible."""
    pass


@cli.command()
@click.option("--base-url", default=None, help=BASE_URL_HELP)
def health(base_url):
    """Check the health status of the Telugu Bible server."""
    try:
        status = health_check(base_url)
        click.echo(f"Server Status: {status.status}")
        click.echo(f"Books index loaded: {status.books_index_loaded}")
        return 0
    except Exception as e:
        click.echo(f"Error: {_error_message(e)}", err=True)
        raise SystemExit(1)


@cli.command()
@click.option("--base-url", default=None, help=BASE_URL_HELP)
def books(base_url):
    """List every book with its English and Telugu names."""
    try:
        for book in list_books(base_url):
            click.echo(f"{book.english}\t{book.telugu}")
        return 0
    except Exception as e:
        click.echo(f"Error: {_error_message(e)}", err=True)
        raise SystemExit(1)


@cli.command()
@click.argument("book")
@click.argument("chapter", required=False)
@click.argument("verse", required=False)
@click.option("--base-url", default=None, help=BASE_URL_HELP)
def read(book, chapter, verse, base_url):
    """Read a BOOK (English or Telugu name), one of its CHAPTERs, or a single VERSE."""
    try:
        passage = get_passage(book, chapter, verse, base_url)
        if verse is not None:
            click.echo(f"{book} {chapter}:{passage['verse']} {passage['text']}")
        elif chapter is not None:
            for item in passage:
                click.echo(f"{item['verse']}. {item['text']}")
        else:
            click.echo(json.dumps(passage, ensure_ascii=False, indent=2))
        return 0
    except Exception as e:
        click.echo(f"Error: {_error_message(e)}", err=True)
        raise SystemExit(1)


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind the server to (default: server.host from config)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind the server to (default: server.port from config)",
)
@click.option(
    "--reload",
    is_flag=True,
    help="Enable auto-reload on code changes (for development)",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (for production, default: 1)",
)
def server(host, port, reload, workers):
    """Start the Telugu Bible FastAPI server."""
    from telugu_bible.config import telugu_bible_settings

    host = host or telugu_bible_settings.server.host
    port = port or telugu_bible_settings.server.port
    try:
        import uvicorn

        click.echo(f"Starting Telugu Bible server on {host}:{port}...")
        if reload:
            click.echo("Auto-reload enabled (development mode)")
        if workers > 1:
            click.echo(f"Using {workers} worker processes")

        uvicorn.run(
            "telugu_bible.server.server:app",
            host=host,
            port=port,
            reload=reload,
            workers=workers
            if not reload
            else 1,  # reload doesn't work with multiple workers
        )
    except ImportError:
        click.echo("Error: uvicorn is required to run the server.", err=True)
        click.echo("It should be installed with fastapi[standard].", err=True)
        raise SystemExit(1)
    except Exception as e:
        click.echo(f"Error starting server: {e}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
