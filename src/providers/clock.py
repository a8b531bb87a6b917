"""Clock capability used for timestamps and "today" comparisons."""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Anything able to tell the current UTC date and time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock backed by the system time, always timezone-aware UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant.

    Naive datetimes are interpreted as UTC.
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self.instant
