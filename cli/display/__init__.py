"""Display module for terminal output.

Provides the shared Rich console and the event table renderer.
"""

from cli.display.console import console
from cli.display.table_renderer import TableRenderer

__all__ = [
    "console",
    "TableRenderer",
]
