"""Atom feed renderer for event collections."""

import re
import xml.etree.ElementTree as ET
from datetime import date, datetime, time, timezone
from typing import Iterable, Optional

from eventkalender.constants import (
    CONTENT_TYPE_ATOM,
    DEFAULT_FEED_AUTHOR,
    DEFAULT_FEED_ID,
    DEFAULT_FEED_TITLE,
)
from eventkalender.models.event import Event
from eventkalender.output.base import event_uuid

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'

# Feed timestamp when no event has a start date
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Code points XML 1.0 does not allow in documents
_XML_ILLEGAL = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _xml_text(value: str) -> str:
    return _XML_ILLEGAL.sub("", value)


def _timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _midnight_utc(value: date) -> datetime:
    return datetime.combine(value, time(0), tzinfo=timezone.utc)


class AtomRenderer:
    """Renderer for Atom 1.0 feeds."""

    content_type = CONTENT_TYPE_ATOM

    def __init__(
        self,
        title: str = DEFAULT_FEED_TITLE,
        feed_id: str = DEFAULT_FEED_ID,
        author: str = DEFAULT_FEED_AUTHOR,
    ):
        self.title = title
        self.feed_id = feed_id
        self.author = author

    def render(self, events: Iterable[Event]) -> str:
        """Render events as an Atom feed, one entry per event.

        Timestamps are taken from event start dates rather than the clock,
        so the same events always produce the same feed.
        """
        events = list(events)
        updated = self._feed_updated(events)

        feed = ET.Element("feed", {"xmlns": ATOM_NAMESPACE})
        ET.SubElement(feed, "title").text = _xml_text(self.title)
        ET.SubElement(feed, "id").text = _xml_text(self.feed_id)
        ET.SubElement(feed, "updated").text = _timestamp(updated)
        author = ET.SubElement(feed, "author")
        ET.SubElement(author, "name").text = _xml_text(self.author)

        for event in events:
            feed.append(self._entry(event, updated))

        ET.indent(feed)
        return XML_DECLARATION + ET.tostring(feed, encoding="unicode") + "\n"

    def _entry(self, event: Event, feed_updated: datetime) -> ET.Element:
        entry = ET.Element("entry")
        ET.SubElement(entry, "title").text = _xml_text(event.name)
        ET.SubElement(entry, "id").text = event_uuid(event).urn

        if event.start_date is not None:
            updated = _midnight_utc(event.start_date)
        else:
            updated = feed_updated
        ET.SubElement(entry, "updated").text = _timestamp(updated)

        if event.description:
            ET.SubElement(
                entry, "link", {"rel": "alternate", "href": _xml_text(event.description)}
            )

        summary = ET.SubElement(entry, "summary", {"type": "text"})
        summary.text = _xml_text(
            "\n".join(part for part in (event.location, event.description) if part)
        )
        return entry

    @staticmethod
    def _feed_updated(events: list[Event]) -> datetime:
        latest: Optional[date] = max(
            (e.start_date for e in events if e.start_date is not None),
            default=None,
        )
        if latest is None:
            return EPOCH
        return _midnight_utc(latest)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "atom"
