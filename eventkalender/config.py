"""Configuration for the event catalog."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from eventkalender.constants import (
    DEFAULT_CALENDAR_NAME,
    DEFAULT_FEED_AUTHOR,
    DEFAULT_FEED_ID,
    DEFAULT_FEED_TITLE,
)


class EventkalenderConfig(BaseModel):
    """Event catalog configuration with Pydantic validation."""

    # Event source
    events_file: Path = Field(default=Path("data/events.json"))

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="eventkalender.log")

    # Output metadata
    calendar_name: str = Field(default=DEFAULT_CALENDAR_NAME)
    feed_title: str = Field(default=DEFAULT_FEED_TITLE)
    feed_id: str = Field(default=DEFAULT_FEED_ID)
    feed_author: str = Field(default=DEFAULT_FEED_AUTHOR)

    @classmethod
    def from_env(cls) -> "EventkalenderConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Paths
        if "EVENTS_FILE" in os.environ:
            config_dict["events_file"] = Path(os.environ["EVENTS_FILE"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Output metadata
        if "CALENDAR_NAME" in os.environ:
            config_dict["calendar_name"] = os.environ["CALENDAR_NAME"]
        if "FEED_TITLE" in os.environ:
            config_dict["feed_title"] = os.environ["FEED_TITLE"]
        if "FEED_ID" in os.environ:
            config_dict["feed_id"] = os.environ["FEED_ID"]
        if "FEED_AUTHOR" in os.environ:
            config_dict["feed_author"] = os.environ["FEED_AUTHOR"]

        return cls(**config_dict)
