#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf API server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - serve the API and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app module reads these at import time
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    try:
        if reload:
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import print_schema

    sdl = print_schema()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
