"""Event model with Pydantic v2 validation."""

from datetime import date, timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from eventkalender.dates import normalize_date
from eventkalender.models.calendar_event import CalendarEvent


class Event(BaseModel):
    """A scheduled talk or conference.

    Dates are normalized on construction and on every update: they are
    always a ``date`` or ``None``, never the raw input string.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str
    location: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None  # usually the event URL
    short_name: Optional[str] = None
    wiki_path: Optional[str] = None
    streaming: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def convert_date_string(cls, v: Any) -> Optional[date]:
        """Convert YYYY-MM-DD string to date, or None if invalid."""
        return normalize_date(v)

    # Checked per field so a rejected assignment stores nothing
    @field_validator("start_date")
    @classmethod
    def validate_start_before_end(
        cls, v: Optional[date], info: ValidationInfo
    ) -> Optional[date]:
        """Validate start date is not after the end date."""
        _check_date_order(v, info.data.get("end_date"))
        return v

    @field_validator("end_date")
    @classmethod
    def validate_end_after_start(
        cls, v: Optional[date], info: ValidationInfo
    ) -> Optional[date]:
        """Validate end date is not before the start date."""
        _check_date_order(info.data.get("start_date"), v)
        return v

    def set_start_date(self, value: Any) -> Optional[date]:
        """Normalize and store a new start date.

        Returns:
            The stored start date (None if the input was not a valid date)

        Raises:
            ValueError: If the new start date is after the end date
        """
        start_date = normalize_date(value)
        _check_date_order(start_date, self.end_date)
        self.start_date = start_date
        return self.start_date

    def set_end_date(self, value: Any) -> Optional[date]:
        """Normalize and store a new end date.

        Returns:
            The stored end date (None if the input was not a valid date)

        Raises:
            ValueError: If the new end date is before the start date
        """
        end_date = normalize_date(value)
        _check_date_order(self.start_date, end_date)
        self.end_date = end_date
        return self.end_date

    @property
    def has_dates(self) -> bool:
        """True if both start and end date are set."""
        return self.start_date is not None and self.end_date is not None

    def to_calendar_event(self) -> CalendarEvent:
        """Convert to an all-day calendar entry.

        The end is exclusive, so a talk ending on day D occupies the
        calendar through D and the entry ends on D + 1.
        """
        end = None
        if self.end_date is not None:
            try:
                end = self.end_date + timedelta(days=1)
            except OverflowError:
                # 9999-12-31 has no following day
                end = None
        return CalendarEvent(
            title=self.name,
            location=self.location,
            start=self.start_date,
            end=end,
            description=self.description,
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary.

        All fields are present; absent values are None and dates are
        formatted as YYYY-MM-DD.
        """
        return self.model_dump(mode="json")


def _check_date_order(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValueError("end_date must be >= start_date")
