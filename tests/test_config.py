"""Tests for configuration."""

from pathlib import Path

from eventkalender.config import EventkalenderConfig


def test_config_defaults():
    """Test EventkalenderConfig default values."""
    config = EventkalenderConfig()
    assert config.events_file == Path("data/events.json")
    assert config.log_dir == Path("logs")
    assert config.log_filename == "eventkalender.log"
    assert config.calendar_name == "Eventkalender"
    assert config.feed_id == "urn:eventkalender:events"


def test_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("EVENTS_FILE", "/srv/events.json")
    monkeypatch.setenv("LOG_DIR", "/var/log/eventkalender")
    monkeypatch.setenv("LOG_FILENAME", "app.log")
    monkeypatch.setenv("CALENDAR_NAME", "VOC Events")
    monkeypatch.setenv("FEED_TITLE", "VOC Feed")
    monkeypatch.setenv("FEED_ID", "urn:voc:events")
    monkeypatch.setenv("FEED_AUTHOR", "VOC")

    config = EventkalenderConfig.from_env()
    assert config.events_file == Path("/srv/events.json")
    assert config.log_dir == Path("/var/log/eventkalender")
    assert config.log_filename == "app.log"
    assert config.calendar_name == "VOC Events"
    assert config.feed_title == "VOC Feed"
    assert config.feed_id == "urn:voc:events"
    assert config.feed_author == "VOC"


def test_config_from_env_file(tmp_path, monkeypatch):
    """Test loading config from .env file."""
    # Registered with monkeypatch so the value loaded from .env is undone
    monkeypatch.setenv("CALENDAR_NAME", "unset")
    monkeypatch.delenv("CALENDAR_NAME")
    (tmp_path / ".env").write_text("CALENDAR_NAME=From Dotenv\n")
    monkeypatch.chdir(tmp_path)

    config = EventkalenderConfig.from_env()
    assert config.calendar_name == "From Dotenv"
