"""Composition of the filter, order and limit stages."""

import random
from datetime import datetime

from .events import FutureEvent, StoredEvent, filter_expired_events
from .ordering import SortOrder, limit_events, sort_events


def applicable_events(
    events: list[StoredEvent],
    now: datetime | None = None,
    order: SortOrder | None = None,
    limit: int | None = None,
    rng: random.Random | None = None,
) -> list[FutureEvent]:
    """
    Turn stored events into the list to display.

    Expired events are dropped, the rest are ordered and capped at `limit`.
    Pure function - no I/O.
    """
    current = filter_expired_events(events, now)
    ordered = sort_events(current, order, rng)
    return limit_events(ordered, limit)
