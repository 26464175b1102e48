"""CLI commands package."""

from cli.commands.ls import ls_command
from cli.commands.render import render_command
from cli.commands.serve import serve_command

__all__ = [
    "ls_command",
    "render_command",
    "serve_command",
]
