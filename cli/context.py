"""Shared CLI context with lazy-initialized dependencies."""

from eventkalender.config import EventkalenderConfig
from eventkalender.ingestion import JSONReader
from eventkalender.output import RendererRegistry, setup_renderer_registry


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        events = ctx.reader.read(path)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: EventkalenderConfig | None = None
        self._reader: JSONReader | None = None
        self._renderer_registry: RendererRegistry | None = None

    @property
    def config(self) -> EventkalenderConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = EventkalenderConfig.from_env()
        return self._config

    @property
    def reader(self) -> JSONReader:
        """Get events file reader (lazy-loaded)."""
        if self._reader is None:
            self._reader = JSONReader()
        return self._reader

    @property
    def renderer_registry(self) -> RendererRegistry:
        """Get renderer registry configured from settings (lazy-loaded)."""
        if self._renderer_registry is None:
            self._renderer_registry = setup_renderer_registry(self.config)
        return self._renderer_registry


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
