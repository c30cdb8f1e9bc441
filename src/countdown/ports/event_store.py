"""Event storage interface."""

from typing import Protocol

from countdown.core.events import StoredEvent


class EventStore(Protocol):
    """Interface for loading and adding stored events."""

    def load(self) -> list[StoredEvent]:
        """Load all stored events. Returns an empty list if nothing is stored."""
        ...

    def add(self, event: StoredEvent) -> None:
        """Append an event to the store."""
        ...
