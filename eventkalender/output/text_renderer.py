"""Plain text renderer for event collections."""

from typing import Iterable

from eventkalender.constants import CONTENT_TYPE_TEXT
from eventkalender.dates import format_date
from eventkalender.models.event import Event

# Placeholder for a missing date
ABSENT_DATE = "?"

OPTIONAL_FIELDS = ("description", "short_name", "wiki_path", "streaming")


class TextRenderer:
    """Renderer for human-readable text listings."""

    content_type = CONTENT_TYPE_TEXT

    def render(self, events: Iterable[Event]) -> str:
        """Render one block of ``key: value`` lines per event.

        Blocks are separated by a blank line. Optional fields are only
        listed when set.
        """
        blocks = [self._block(event) for event in events]
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def _block(self, event: Event) -> str:
        lines = [
            f"name: {event.name}",
            f"location: {event.location}",
            f"start_date: {format_date(event.start_date) or ABSENT_DATE}",
            f"end_date: {format_date(event.end_date) or ABSENT_DATE}",
        ]
        for field in OPTIONAL_FIELDS:
            value = getattr(event, field)
            if value:
                lines.append(f"{field}: {value}")
        return "\n".join(lines)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "txt"
