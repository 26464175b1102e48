"""Ordered collection of events."""

from typing import Iterator

from pydantic import Field, RootModel

from eventkalender.models.event import Event


class EventCollection(RootModel[list[Event]]):
    """Events in source order.

    Order is significant and never changed (no sorting by date). Renderers
    only read from the collection.
    """

    root: list[Event] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.root)

    def __getitem__(self, index: int) -> Event:
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)

    @property
    def events(self) -> list[Event]:
        """Events as a list (same order)."""
        return self.root

    def to_ics(self) -> str:
        """Render as iCalendar document."""
        from eventkalender.output.ics_renderer import ICSRenderer

        return ICSRenderer().render(self)

    def to_atom(self) -> str:
        """Render as Atom feed."""
        from eventkalender.output.atom_renderer import AtomRenderer

        return AtomRenderer().render(self)

    def to_txt(self) -> str:
        """Render as plain text listing."""
        from eventkalender.output.text_renderer import TextRenderer

        return TextRenderer().render(self)

    def to_json(self) -> str:
        """Render as JSON array."""
        from eventkalender.output.json_renderer import JSONRenderer

        return JSONRenderer().render(self)
