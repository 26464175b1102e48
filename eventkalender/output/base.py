"""Base classes for event renderers."""

import logging
import uuid
from typing import Dict, Iterable, List, NamedTuple, Protocol

from eventkalender.dates import format_date
from eventkalender.exceptions import RenderError, UnsupportedFormatError
from eventkalender.models.event import Event

logger = logging.getLogger(__name__)


class EventRenderer(Protocol):
    """Protocol for event renderers."""

    content_type: str

    def render(self, events: Iterable[Event]) -> str:
        """Render events in the given order."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...


class RenderedOutput(NamedTuple):
    """Rendered document plus the content type to serve it with."""

    content: str
    content_type: str


def render_output(renderer: EventRenderer, events: Iterable[Event]) -> RenderedOutput:
    """Run a renderer and pair its output with its content type.

    Raises:
        RenderError: If the renderer fails for this call
    """
    try:
        content = renderer.render(events)
    except Exception as e:
        raise RenderError(
            f"Failed to render events as {renderer.get_extension()}: {e}"
        ) from e
    return RenderedOutput(content=content, content_type=renderer.content_type)


def event_uuid(event: Event) -> uuid.UUID:
    """Stable identifier derived from name, location and dates."""
    key = "|".join(
        [
            event.name,
            event.location,
            format_date(event.start_date) or "",
            format_date(event.end_date) or "",
        ]
    )
    return uuid.uuid5(uuid.NAMESPACE_URL, key)


class RendererRegistry:
    """Registry for event renderers by file extension."""

    def __init__(self):
        """Initialize registry."""
        self._renderers: Dict[str, EventRenderer] = {}

    def register(self, renderer: EventRenderer, extensions: List[str]) -> None:
        """Register renderer for file extensions."""
        for ext in extensions:
            # Normalize extension (remove leading dot, lowercase)
            normalized_ext = ext.lstrip(".").lower()
            self._renderers[normalized_ext] = renderer

    def get_renderer(self, extension: str) -> EventRenderer:
        """Get renderer by file extension."""
        ext = extension.lstrip(".").lower()
        if ext not in self._renderers:
            raise UnsupportedFormatError(
                f"Unsupported output format: .{ext}. "
                f"Supported formats: {', '.join(self.extensions())}"
            )
        return self._renderers[ext]

    def extensions(self) -> List[str]:
        """Registered extensions, sorted."""
        return sorted(self._renderers)
