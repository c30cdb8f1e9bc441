"""Adapters - I/O implementations of ports."""

from .file_event_store import EventStoreError, FileEventStore

__all__ = [
    "FileEventStore",
    "EventStoreError",
]
