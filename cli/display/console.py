"""Rich console shared by CLI display code."""

from rich.console import Console

console = Console()
