"""JSON renderer for event collections."""

import json
from typing import Iterable

from eventkalender.constants import CONTENT_TYPE_JSON
from eventkalender.models.event import Event


class JSONRenderer:
    """Renderer for JSON arrays of events."""

    content_type = CONTENT_TYPE_JSON

    def render(self, events: Iterable[Event]) -> str:
        """Render events as a JSON array.

        Every object carries all event fields; absent values are null.
        """
        return json.dumps(
            [event.to_dict() for event in events], indent=2, ensure_ascii=False
        )

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"
