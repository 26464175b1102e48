"""Output layer for event collections."""

from typing import Iterable

from eventkalender.config import EventkalenderConfig
from eventkalender.models.event import Event
from eventkalender.output.atom_renderer import AtomRenderer
from eventkalender.output.base import (
    EventRenderer,
    RenderedOutput,
    RendererRegistry,
    render_output,
)
from eventkalender.output.ics_renderer import ICSRenderer
from eventkalender.output.json_renderer import JSONRenderer
from eventkalender.output.text_renderer import TextRenderer


def setup_renderer_registry(config: EventkalenderConfig | None = None) -> RendererRegistry:
    """Set up renderer registry with all renderers."""
    if config is None:
        config = EventkalenderConfig()

    registry = RendererRegistry()
    registry.register(ICSRenderer(calendar_name=config.calendar_name), [".ics", ".ical"])
    registry.register(
        AtomRenderer(
            title=config.feed_title,
            feed_id=config.feed_id,
            author=config.feed_author,
        ),
        [".atom"],
    )
    registry.register(TextRenderer(), [".txt"])
    registry.register(JSONRenderer(), [".json"])
    return registry


def render_ics(events: Iterable[Event]) -> RenderedOutput:
    """Render events as iCalendar (text/calendar)."""
    return render_output(ICSRenderer(), events)


def render_atom(events: Iterable[Event]) -> RenderedOutput:
    """Render events as Atom feed (application/atom+xml)."""
    return render_output(AtomRenderer(), events)


def render_text(events: Iterable[Event]) -> RenderedOutput:
    """Render events as plain text (text/plain)."""
    return render_output(TextRenderer(), events)


def render_json(events: Iterable[Event]) -> RenderedOutput:
    """Render events as JSON (application/json)."""
    return render_output(JSONRenderer(), events)


__all__ = [
    "AtomRenderer",
    "EventRenderer",
    "ICSRenderer",
    "JSONRenderer",
    "RenderedOutput",
    "RendererRegistry",
    "TextRenderer",
    "render_atom",
    "render_ics",
    "render_json",
    "render_output",
    "render_text",
    "setup_renderer_registry",
]
