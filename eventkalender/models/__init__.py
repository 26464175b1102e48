"""Pydantic models for the event catalog."""

from eventkalender.models.calendar_event import CalendarEvent
from eventkalender.models.collection import EventCollection
from eventkalender.models.event import Event

__all__ = [
    "CalendarEvent",
    "Event",
    "EventCollection",
]
