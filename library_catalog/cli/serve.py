#!/usr/bin/env python3
"""
CLI for running the catalog web application.

The application reads its storage backend and logging configuration from
the environment (see ``library_catalog.config``); this command only chooses
where uvicorn listens.
"""

import logging

import click
import uvicorn

logger = logging.getLogger(__name__)

APP_PATH = "library_catalog.api.app:app"


@click.command()
@click.option("--host", default="127.0.0.1", help="Interface to bind.")
@click.option("--port", default=8000, type=int, help="Port to listen on.")
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Restart the server when source files change.",
)
def main(host: str, port: int, reload: bool) -> None:
    """Serve the library catalog over HTTP."""
    click.echo(f"Serving library catalog on http://{host}:{port}/catalog")
    uvicorn.run(APP_PATH, host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
