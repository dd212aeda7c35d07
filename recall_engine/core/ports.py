"""
Ports (interfaces) for the collaborators the engine needs.

Callers supply concrete implementations. The engine depends only on these
abstractions and never touches storage itself.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from recall_engine.core.models import ReviewHistoryEntry, StreakState


class IClock(Protocol):
    """Source of "now" and calendar-day arithmetic."""

    def now(self) -> datetime:
        ...

    def start_of_day(self, dt: datetime) -> datetime:
        ...

    def day_difference(self, start: datetime, end: datetime) -> int:
        ...

    def add_days(self, dt: datetime, days: int) -> datetime:
        ...


class IHistoryProvider(Protocol):
    """Supplies review history for an item, most recent first."""

    def history_for(self, item_id: str) -> Sequence[ReviewHistoryEntry]:
        ...


class IStreakStore(Protocol):
    """
    Persistence sink for the single streak record.

    ``load`` returns None when no record has been saved yet.
    """

    def load(self) -> StreakState | None:
        ...

    def save(self, state: StreakState) -> None:
        ...
