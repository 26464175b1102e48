"""Serve the event catalog over HTTP."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from eventkalender import create_app
from eventkalender.exceptions import IngestionError
from cli.context import get_context

logger = logging.getLogger(__name__)


def serve_command(
    events_file: Annotated[
        Path | None,
        typer.Option("--events-file", "-e", help="Path to JSON events file (defaults to EVENTS_FILE)"),
    ] = None,
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = "127.0.0.1",
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = 5000,
) -> None:
    """
    Run the web app serving /events.ical, /events.atom, /events.txt
    and /events.json.
    """
    ctx = get_context()
    config = ctx.config
    if events_file is not None:
        config = config.model_copy(update={"events_file": events_file})

    try:
        app = create_app(config=config)
    except IngestionError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Serving {config.events_file} on http://{host}:{port}")
    app.run(host=host, port=port)
