"""Clock abstraction so timestamps can be pinned in tests"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Clock(ABC):
    """Source of the current time"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware UTC datetime"""
        pass


class SystemClock(Clock):
    """Clock backed by the system time"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock that only moves when told to"""

    def __init__(self, fixed_time: datetime):
        """
        Args:
            fixed_time: Initial time. Naive values are treated as UTC.
        """
        self._current_time = _as_utc(fixed_time)

    def now(self) -> datetime:
        return self._current_time

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by ``delta``"""
        self._current_time += delta
