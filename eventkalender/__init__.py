"""Event catalog web application."""

import logging

from flask import Flask, Response

from eventkalender.config import EventkalenderConfig
from eventkalender.exceptions import RenderError, UnsupportedFormatError
from eventkalender.ingestion import JSONReader
from eventkalender.models.collection import EventCollection
from eventkalender.output import render_output, setup_renderer_registry

logger = logging.getLogger(__name__)


def create_app(
    events: EventCollection | None = None, config: EventkalenderConfig | None = None
) -> Flask:
    """Create the Flask app serving the event catalog.

    Args:
        events: Events to serve. Loaded from ``config.events_file`` if omitted.
        config: Optional configuration (defaults to environment)
    """
    if config is None:
        config = EventkalenderConfig.from_env()
    if events is None:
        events = JSONReader().read(config.events_file)

    registry = setup_renderer_registry(config)
    app = Flask(__name__)

    @app.route("/events.<extension>", methods=["GET"])
    def get_events(extension: str):
        """Serve the catalog in the format named by the extension."""
        try:
            renderer = registry.get_renderer(extension)
        except UnsupportedFormatError:
            return ("Unsupported format", 404)

        try:
            output = render_output(renderer, events)
        except RenderError as e:
            logger.error(str(e))
            return ("Failed to render events", 500)

        return Response(
            output.content,
            content_type=f"{output.content_type}; charset=utf-8",
        )

    return app
