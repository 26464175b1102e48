"""Tests for date normalization."""

from datetime import date, datetime

import pytest

from eventkalender.dates import format_date, normalize_date


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2014-05-23", date(2014, 5, 23)),
        ("2016-02-29", date(2016, 2, 29)),
        ("0999-01-01", date(999, 1, 1)),
        (" 2015-08-13 ", date(2015, 8, 13)),
    ],
)
def test_normalize_valid_dates(value, expected):
    """Test well-formed dates are parsed."""
    assert normalize_date(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "2014-13-40",
        "2014-02-30",
        "2015-02-29",
        "not-a-date",
        "bad-input",
        "",
        "   ",
        None,
        "2014-5-23",
        "20140523",
        "23.05.2014",
        "2014-05-23T10:00:00",
        "2014/05/23",
        "abcd-ef-gh",
        "٢٠١٤-٠٥-٢٣",
        20140523,
        ["2014-05-23"],
    ],
)
def test_normalize_invalid_dates_return_none(value):
    """Test malformed input yields None instead of raising."""
    assert normalize_date(value) is None


def test_normalize_date_passthrough():
    """Test date objects are returned unchanged."""
    assert normalize_date(date(2014, 5, 23)) == date(2014, 5, 23)


def test_normalize_datetime_uses_date_part():
    """Test datetime objects are reduced to their date."""
    result = normalize_date(datetime(2014, 5, 23, 18, 30))
    assert result == date(2014, 5, 23)
    assert type(result) is date


def test_format_date():
    """Test dates are formatted in the parsing pattern."""
    assert format_date(date(2014, 5, 23)) == "2014-05-23"
    assert format_date(date(999, 1, 1)) == "0999-01-01"
    assert format_date(None) is None


def test_format_then_normalize_returns_same_date():
    """Test formatted dates parse back to the same value."""
    for value in (date(2014, 5, 23), date(2000, 2, 29), date(2015, 12, 31)):
        assert normalize_date(format_date(value)) == value
