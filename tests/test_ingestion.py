"""Tests for ingestion layer."""

import json
from datetime import date

import pytest

from eventkalender.exceptions import IngestionError
from eventkalender.ingestion import JSONReader
from eventkalender.models.collection import EventCollection


def test_json_reader_array_format(events_file):
    """Test reading an array of events."""
    events = JSONReader().read(events_file)

    assert isinstance(events, EventCollection)
    assert [e.name for e in events] == ["Camp", "Congress"]
    assert events[0].start_date == date(2015, 8, 13)
    assert events[1].streaming == "planned"


def test_json_reader_events_key_format(tmp_path):
    """Test reading an object with an events key."""
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps({"events": [{"name": "Camp", "location": "Field", "start_date": "2015-08-13", "end_date": "2015-08-17"}]}),
        encoding="utf-8",
    )
    events = JSONReader().read(path)
    assert len(events) == 1
    assert events[0].end_date == date(2015, 8, 17)


def test_json_reader_tolerates_bad_dates(tmp_path):
    """Test invalid dates load as absent."""
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps([{"name": "Camp", "location": "Field", "start_date": "bad-input", "end_date": "2015-13-01"}]),
        encoding="utf-8",
    )
    events = JSONReader().read(path)
    assert events[0].start_date is None
    assert events[0].end_date is None


def test_json_reader_missing_file(tmp_path):
    """Test missing file raises IngestionError."""
    with pytest.raises(IngestionError):
        JSONReader().read(tmp_path / "missing.json")


def test_json_reader_invalid_json(tmp_path):
    """Test malformed JSON raises IngestionError."""
    path = tmp_path / "events.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(IngestionError):
        JSONReader().read(path)


def test_json_reader_unknown_layout(tmp_path):
    """Test unrecognized structure raises IngestionError."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"talks": []}), encoding="utf-8")
    with pytest.raises(IngestionError) as exc_info:
        JSONReader().read(path)
    assert "not recognized" in str(exc_info.value)


def test_json_reader_missing_required_field(tmp_path):
    """Test events without a name are rejected."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps([{"location": "Field"}]), encoding="utf-8")
    with pytest.raises(IngestionError) as exc_info:
        JSONReader().read(path)
    assert "Failed to parse events" in str(exc_info.value)
