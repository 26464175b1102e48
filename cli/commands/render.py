"""Render an events file to one of the output formats."""

import logging
import sys
from pathlib import Path

import typer
from typing_extensions import Annotated

from eventkalender.exceptions import EventkalenderError
from eventkalender.output import render_output
from cli.context import get_context

logger = logging.getLogger(__name__)


def render_command(
    events_file: Annotated[
        Path,
        typer.Argument(help="Path to JSON events file"),
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: ics, atom, txt or json"),
    ] = "json",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """
    Render events to ICS, Atom, text or JSON.

    Events are rendered in file order. Without --output the document is
    written to stdout.
    """
    ctx = get_context()

    try:
        events = ctx.reader.read(events_file)
        renderer = ctx.renderer_registry.get_renderer(format)
        rendered = render_output(renderer, events)
    except EventkalenderError as e:
        logger.error(str(e))
        sys.exit(1)

    if output is None:
        print(rendered.content, end="")
        return

    output.write_text(rendered.content, encoding="utf-8")
    if not ctx.quiet:
        print(f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} Rendered {len(events)} events")
        print(f"  {output.resolve()}")
    logger.info(f"Rendered {events_file} as {renderer.get_extension()} to {output}")
