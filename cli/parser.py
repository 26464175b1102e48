"""CLI app definition and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import ls_command, render_command, serve_command
from cli.context import CLIContext, set_context

app = typer.Typer(
    help="Render the event catalog as ICS, Atom, text or JSON.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors on the console"),
    ] = False,
) -> None:
    """Event catalog tool."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("render")(render_command)
app.command("ls")(ls_command)
app.command("serve")(serve_command)
