"""File-based event storage adapter."""

import json
import logging
import os
from pathlib import Path

from countdown.core.events import StoredEvent

logger = logging.getLogger(__name__)


class EventStoreError(Exception):
    """Raised when the events file cannot be read or written."""


class FileEventStore:
    """
    JSON file event storage.

    Implements EventStore protocol. All events live in one document:
    {"events": [{"name": "...", "time": 1700000000}, ...]}
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> list[StoredEvent]:
        """Load all stored events. Returns an empty list if the file doesn't exist."""
        if not self.path.exists():
            logger.debug(f"No events file at {self.path}")
            return []

        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise EventStoreError(f"Couldn't load events from {self.path}: {e}") from e
        except OSError as e:
            raise EventStoreError(f"Couldn't read {self.path}: {e}") from e

        records = data.get("events") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise EventStoreError(f"Couldn't load events from {self.path}: missing 'events' list")

        events = []
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                raise EventStoreError(f"Invalid event #{i} in {self.path}: expected an object")
            try:
                events.append(StoredEvent.from_dict(record))
            except ValueError as e:
                raise EventStoreError(f"Invalid event #{i} in {self.path}: {e}") from e

        logger.debug(f"Loaded {len(events)} events from {self.path}")
        return events

    def save(self, events: list[StoredEvent]) -> None:
        """Write/overwrite the whole events file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(f".{self.path.name}.tmp")
            tmp_path.write_text(
                json.dumps({"events": [e.to_dict() for e in events]}, indent=2)
            )
            # The old file stays in place until the new one is complete
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise EventStoreError(f"Couldn't write {self.path}: {e}") from e
        logger.debug(f"Saved {len(events)} events to {self.path}")

    def add(self, event: StoredEvent) -> None:
        """Append an event to the store."""
        events = self.load()
        events.append(event)
        self.save(events)
