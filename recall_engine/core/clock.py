"""
Clock implementations.

All calendar arithmetic in the engine goes through a clock so that
"today" and day boundaries can be pinned in tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo


class SystemClock:
    """
    Wall clock with calendar-day arithmetic.

    Day boundaries are evaluated in ``tz`` when given, otherwise in the
    local time of the datetimes passed in.
    """

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def _localize(self, dt: datetime) -> datetime:
        if self.tz is not None and dt.tzinfo is not None:
            return dt.astimezone(self.tz)
        return dt

    def start_of_day(self, dt: datetime) -> datetime:
        """Midnight of the calendar day containing ``dt``."""
        return self._localize(dt).replace(hour=0, minute=0, second=0, microsecond=0)

    def day_difference(self, start: datetime, end: datetime) -> int:
        """
        Number of calendar-day boundaries between two instants.

        23:59 -> 00:01 the next day is 1, while 00:01 -> 23:59 the same
        day is 0. Negative when ``end`` falls on an earlier day.
        """
        return (self._localize(end).date() - self._localize(start).date()).days

    def add_days(self, dt: datetime, days: int) -> datetime:
        return dt + timedelta(days=days)


class FixedClock(SystemClock):
    """Clock frozen at a given instant; ``advance`` moves it forward."""

    def __init__(self, current: datetime, tz: tzinfo | None = None):
        super().__init__(tz=tz)
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        """Move the clock by ``timedelta(**kwargs)`` and return the new instant."""
        self.current = self.current + timedelta(**kwargs)
        return self.current
