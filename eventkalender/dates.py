"""Date normalization for event start and end dates."""

import logging
import re
from datetime import date, datetime

from eventkalender.constants import DATE_FORMAT

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def normalize_date(value: object) -> date | None:
    """Convert a ``YYYY-MM-DD`` string into a date.

    Anything that is not a well-formed, calendar-valid date string yields
    ``None``. This is a normal outcome, not an error, so nothing is raised.

    Args:
        value: Date string, date, datetime or None

    Returns:
        The parsed date, or None if the input is absent or invalid
    """
    if value is None:
        return None
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        logger.debug(f"Ignoring non-string date value: {value!r}")
        return None

    text = value.strip()
    if not text:
        return None
    if not _DATE_PATTERN.match(text):
        logger.debug(f"Ignoring malformed date: {value!r}")
        return None

    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        logger.debug(f"Ignoring out-of-range date: {value!r}")
        return None


def format_date(value: date | None) -> str | None:
    """Format a date as ``YYYY-MM-DD`` (None stays None)."""
    if value is None:
        return None
    return value.isoformat()
