"""List events from an events file."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from eventkalender.exceptions import IngestionError
from cli.context import get_context
from cli.display.table_renderer import TableRenderer

logger = logging.getLogger(__name__)


def ls_command(
    events_file: Annotated[
        Path | None,
        typer.Argument(help="Path to JSON events file (defaults to EVENTS_FILE)"),
    ] = None,
) -> None:
    """List events in file order."""
    ctx = get_context()
    path = events_file or ctx.config.events_file

    try:
        events = ctx.reader.read(path)
    except IngestionError as e:
        logger.error(str(e))
        sys.exit(1)

    TableRenderer().render_event_list(events, path)
