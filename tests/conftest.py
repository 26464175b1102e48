import json

import pytest

from eventkalender import create_app
from eventkalender.config import EventkalenderConfig
from eventkalender.models.collection import EventCollection
from eventkalender.models.event import Event


@pytest.fixture
def camp_event():
    """Single multi-day event with a URL description."""
    return Event(
        name="Camp",
        location="Field",
        start_date="2015-08-13",
        end_date="2015-08-17",
        description="https://example.org",
    )


@pytest.fixture
def sample_events():
    """Three events in source order (not sorted by date)."""
    return EventCollection(
        [
            Event(
                name="Alpha",
                location="Berlin",
                start_date="2014-12-27",
                end_date="2014-12-30",
                description="https://alpha.example.org",
                short_name="alpha14",
                streaming="yes",
            ),
            Event(
                name="Beta",
                location="Hamburg",
                start_date="2014-05-23",
                end_date="2014-05-25",
            ),
            Event(
                name="Gamma",
                location="Leipzig",
                start_date="2015-03-01",
                end_date="2015-03-01",
                wiki_path="/wiki/gamma",
            ),
        ]
    )


@pytest.fixture
def events_file(tmp_path):
    """Events file in array format."""
    path = tmp_path / "events.json"
    path.write_text(
        json.dumps(
            [
                {
                    "name": "Camp",
                    "location": "Field",
                    "start_date": "2015-08-13",
                    "end_date": "2015-08-17",
                    "description": "https://example.org",
                },
                {
                    "name": "Congress",
                    "location": "Hamburg",
                    "start_date": "2015-12-27",
                    "end_date": "2015-12-30",
                    "streaming": "planned",
                },
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def app(sample_events):
    """Create and configure a Flask app for testing."""
    app = create_app(events=sample_events, config=EventkalenderConfig())
    return app
