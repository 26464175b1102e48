"""Shared constants for the event catalog."""

# Textual date format at every boundary (parsing and JSON output)
DATE_FORMAT = "%Y-%m-%d"

# ICS document metadata
ICS_PRODID = "-//Eventkalender//EN"
DEFAULT_CALENDAR_NAME = "Eventkalender"

# Atom feed metadata
DEFAULT_FEED_TITLE = "Eventkalender"
DEFAULT_FEED_ID = "urn:eventkalender:events"
DEFAULT_FEED_AUTHOR = "Eventkalender"

# Content types per output format
CONTENT_TYPE_ICS = "text/calendar"
CONTENT_TYPE_ATOM = "application/atom+xml"
CONTENT_TYPE_TEXT = "text/plain"
CONTENT_TYPE_JSON = "application/json"
