"""Table renderer for event lists."""

from pathlib import Path
from typing import Iterable

from rich.table import Table

from eventkalender.dates import format_date
from eventkalender.models.event import Event
from cli.display.console import console


class TableRenderer:
    """Render event tables.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_event_list(self, events: Iterable[Event], source: Path) -> None:
        """Render events as a table, in the given order.

        Args:
            events: Events to display.
            source: File the events were loaded from (for header).
        """
        events = list(events)
        if not events:
            console.print("No events found")
            return

        console.print(f"Listing {len(events)} events from {source}:")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("NAME", style="cyan")
        table.add_column("LOCATION")
        table.add_column("START", style="dim")
        table.add_column("END", style="dim")
        table.add_column("STREAMING", style="dim")

        for event in events:
            table.add_row(
                event.name,
                event.location,
                format_date(event.start_date) or "-",
                format_date(event.end_date) or "-",
                event.streaming or "-",
            )

        console.print(table)
