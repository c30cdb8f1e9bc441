"""Ordering and limiting of future events."""

import random
from enum import Enum

from .events import FutureEvent


class InvalidSortOrder(ValueError):
    """Raised when an order token is not one of the recognized values."""


class SortOrder(Enum):
    TIME_ASC = "time-asc"
    TIME_DESC = "time-desc"
    SHUFFLE = "shuffle"


SORT_ORDER_TOKENS = [o.value for o in SortOrder]


def parse_sort_order(token: str) -> SortOrder:
    """Parse a CLI/config token into a SortOrder."""
    try:
        return SortOrder(token)
    except ValueError:
        raise InvalidSortOrder(f"Invalid value for 'order': {token}") from None


def sort_events(
    events: list[FutureEvent],
    order: SortOrder | None = None,
    rng: random.Random | None = None,
) -> list[FutureEvent]:
    """
    Return a new list of events in the requested order.

    No order means ascending by days left. Both time orders are stable.
    Shuffle uses the process-wide random source unless `rng` is given.
    """
    if order is SortOrder.SHUFFLE:
        shuffled = list(events)
        (rng or random).shuffle(shuffled)
        return shuffled
    # sorted() is stable with reverse=True too, so ties keep input order
    return sorted(
        events,
        key=lambda e: e.days_left,
        reverse=order is SortOrder.TIME_DESC,
    )


def limit_events(events: list[FutureEvent], limit: int | None = None) -> list[FutureEvent]:
    """Keep at most `limit` events; None keeps all of them, negatives keep none."""
    if limit is None:
        return list(events)
    return list(events[:max(limit, 0)])
