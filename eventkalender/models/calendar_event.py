"""Calendar-ready representation of a single event."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CalendarEvent(BaseModel):
    """All-day calendar entry with an exclusive end date.

    This is the shared input of calendar-aware renderers. It holds plain
    values only, so no calendar library leaks out of the renderer that
    serializes it.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    location: str
    start: Optional[date] = None
    end: Optional[date] = None
    description: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if both start and end are known."""
        return self.start is not None and self.end is not None
