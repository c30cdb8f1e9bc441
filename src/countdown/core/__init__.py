"""Functional core - pure business logic with no I/O."""

from .events import (
    MAX_DAYS_LEFT,
    SECONDS_IN_DAY,
    FutureEvent,
    StoredEvent,
    filter_expired_events,
)
from .ordering import (
    InvalidSortOrder,
    SortOrder,
    limit_events,
    parse_sort_order,
    sort_events,
)
from .pipeline import applicable_events

__all__ = [
    # Events
    "StoredEvent",
    "FutureEvent",
    "filter_expired_events",
    "SECONDS_IN_DAY",
    "MAX_DAYS_LEFT",
    # Ordering
    "SortOrder",
    "InvalidSortOrder",
    "parse_sort_order",
    "sort_events",
    "limit_events",
    # Pipeline
    "applicable_events",
]
