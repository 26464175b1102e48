"""ICS renderer for event collections."""

import logging
from datetime import datetime, time, timezone
from typing import Iterable

from icalendar import Calendar
from icalendar import Event as ICalEvent

from eventkalender.constants import (
    CONTENT_TYPE_ICS,
    DEFAULT_CALENDAR_NAME,
    ICS_PRODID,
)
from eventkalender.models.event import Event
from eventkalender.output.base import event_uuid

logger = logging.getLogger(__name__)


class ICSRenderer:
    """Renderer for iCalendar documents."""

    content_type = CONTENT_TYPE_ICS

    def __init__(self, calendar_name: str = DEFAULT_CALENDAR_NAME):
        self.calendar_name = calendar_name

    def render(self, events: Iterable[Event]) -> str:
        """Render events as an iCalendar document.

        Each event becomes an all-day VEVENT. Events without a start or
        end date cannot be placed on a calendar and are skipped.
        """
        cal = Calendar()
        cal.add("prodid", ICS_PRODID)
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", self.calendar_name)

        for event_model in events:
            entry = event_model.to_calendar_event()
            if not entry.is_complete:
                logger.debug(f"Skipping event '{event_model.name}': missing start or end date")
                continue

            event = ICalEvent()

            # Required fields; UID and DTSTAMP are derived from the event
            # so repeated renders produce identical output
            event.add("summary", entry.title)
            event.add("uid", str(event_uuid(event_model)))
            event.add("dtstamp", datetime.combine(entry.start, time(0), tzinfo=timezone.utc))

            if entry.location:
                event.add("location", entry.location)

            event.add("dtstart", entry.start)
            # End date is already exclusive
            event.add("dtend", entry.end)

            if entry.description:
                event.add("description", entry.description)

            cal.add_component(event)

        return cal.to_ical().decode("utf-8")

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
