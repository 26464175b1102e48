"""JSON file reader for event lists."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from eventkalender.exceptions import IngestionError
from eventkalender.models.collection import EventCollection

logger = logging.getLogger(__name__)


class JSONReader:
    """Reader for JSON event files."""

    def read(self, path: Path) -> EventCollection:
        """Read events from JSON file.

        Supports two formats:
        - Array of events: [{event1}, {event2}, ...]
        - Object with events key: {events: [...]}
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise IngestionError(f"Failed to read JSON file: {e}") from e

        events_data = self._extract_events(data)
        try:
            collection = EventCollection.model_validate(events_data)
        except ValidationError as e:
            raise IngestionError(f"Failed to parse events: {e}") from e

        undated = sum(1 for event in collection if not event.has_dates)
        if undated:
            logger.debug(f"{undated} event(s) in {path} have no valid start or end date")
        logger.info(f"Loaded {len(collection)} events from {path}")
        return collection

    def _extract_events(self, data: dict | list) -> list:
        """Extract event list from the supported JSON layouts."""
        if isinstance(data, list):
            return data

        if isinstance(data, dict) and "events" in data:
            events_data = data["events"]
            if isinstance(events_data, list):
                return events_data

        raise IngestionError(
            "JSON format not recognized. Expected array of events "
            "or object with 'events' key."
        )
