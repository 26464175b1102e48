"""Exception hierarchy for event catalog operations."""


class EventkalenderError(Exception):
    """Base exception for event catalog operations."""

    pass


class IngestionError(EventkalenderError):
    """Error while loading events from a source file."""

    pass


class UnsupportedFormatError(EventkalenderError):
    """Output format not supported."""

    pass


class RenderError(EventkalenderError):
    """Error while rendering events to an output format."""

    pass
