"""Pure event domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime, timezone

SECONDS_IN_DAY = 86400
# Day counts are capped at the unsigned 16-bit range; anything further out
# is treated as unrepresentable and filtered out.
MAX_DAYS_LEFT = 65535
MAX_EVENT_TIME = 2**32 - 1


@dataclass(frozen=True)
class StoredEvent:
    """A named target moment, as persisted by the event store."""

    name: str
    time: int  # Unix timestamp (seconds)

    def days_left(self, now: datetime | None = None) -> int | None:
        """Whole days until the event, or None if it has passed or is too far out."""
        now = now or datetime.now(timezone.utc)
        delta = self.time - now.timestamp()
        if delta <= 0:
            return None
        days = int(delta // SECONDS_IN_DAY)
        if days > MAX_DAYS_LEFT:
            return None
        return days

    def as_future_event(self, now: datetime | None = None) -> "FutureEvent | None":
        days = self.days_left(now)
        if days is None:
            return None
        return FutureEvent(name=self.name, days_left=days)

    def to_dict(self) -> dict:
        return {"name": self.name, "time": self.time}

    @classmethod
    def from_dict(cls, data: dict) -> "StoredEvent":
        """Create a StoredEvent from a persisted record."""
        name = data.get("name")
        time = data.get("time")
        if not isinstance(name, str) or not name:
            raise ValueError(f"event name must be a non-empty string, got {name!r}")
        # bool is an int subclass
        if not isinstance(time, int) or isinstance(time, bool):
            raise ValueError(f"event time must be an integer, got {time!r}")
        if not 0 <= time <= MAX_EVENT_TIME:
            raise ValueError(f"event time out of range: {time}")
        return cls(name=name, time=time)


@dataclass(frozen=True)
class FutureEvent:
    """An event known not to have happened yet."""

    name: str
    days_left: int

    def format(self) -> str:
        return f"{self.days_left} days until {self.name}"


def filter_expired_events(
    events: list[StoredEvent],
    now: datetime | None = None,
) -> list[FutureEvent]:
    """
    Drop events at or before `now` and compute days left for the rest.

    Events more than MAX_DAYS_LEFT days away are dropped as well.
    Input order is preserved.

    Pure function - no I/O.
    """
    now = now or datetime.now(timezone.utc)
    future = []
    for event in events:
        future_event = event.as_future_event(now)
        if future_event is not None:
            future.append(future_event)
    return future
