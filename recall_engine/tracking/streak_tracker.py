"""
Streak Tracker - consecutive calendar days with study activity.

Only call ``record_activity`` when a study activity actually happened;
calling it on app launch would inflate the streak.

Transitions (by calendar days since the last counted activity):
    never active -> streak 1, started now
    same day     -> unchanged
    next day     -> streak + 1
    gap of 2+    -> streak 1, started today
"""

from __future__ import annotations

import threading
from datetime import datetime

from loguru import logger

from recall_engine.core.clock import SystemClock
from recall_engine.core.models import ActiveStreak, NotStarted, StreakState
from recall_engine.core.ports import IClock, IStreakStore


def advance_streak(state: StreakState | None, now: datetime, clock: IClock) -> StreakState:
    """
    Apply one "activity occurred" event to a streak.

    Args:
        state: Current record, or None if none has been stored yet
        now: When the activity happened
        clock: Calendar arithmetic

    Returns:
        The next state (the same object when nothing changes)
    """
    if state is None:
        logger.debug("No streak record yet; bootstrapping")
        state = NotStarted()

    if isinstance(state, NotStarted):
        return ActiveStreak(
            current_streak=1,
            longest_streak=max(state.longest_streak, 1),
            last_active_date=now,
            streak_start_date=now,
        )

    day_difference = clock.day_difference(state.last_active_date, now)

    if day_difference == 0:
        return state

    if day_difference < 0:
        logger.warning(
            "Activity at {} predates last counted activity {}; streak unchanged",
            now,
            state.last_active_date,
        )
        return state

    if day_difference == 1:
        current = state.current_streak + 1
        return ActiveStreak(
            current_streak=current,
            longest_streak=max(state.longest_streak, current),
            last_active_date=now,
            streak_start_date=state.streak_start_date,
        )

    logger.debug("Streak broken after {} days; restarting", day_difference)
    return ActiveStreak(
        current_streak=1,
        longest_streak=state.longest_streak,
        last_active_date=now,
        streak_start_date=clock.start_of_day(now),
    )


class InMemoryStreakStore:
    """Streak store that keeps the record in process memory."""

    def __init__(self, state: StreakState | None = None):
        self._state = state

    def load(self) -> StreakState | None:
        return self._state

    def save(self, state: StreakState) -> None:
        self._state = state


class StreakTracker:
    """
    Keeps one streak record up to date.

    The load-advance-save sequence runs under a lock so two simultaneous
    activities cannot both apply a +1 to the same stale record. Errors
    raised by the store propagate to the caller.
    """

    def __init__(self, store: IStreakStore | None = None, clock: IClock | None = None):
        self.store = store if store is not None else InMemoryStreakStore()
        self.clock = clock or SystemClock()
        self._lock = threading.Lock()

    @property
    def state(self) -> StreakState:
        """Current record; ``NotStarted()`` when nothing is stored."""
        with self._lock:
            stored = self.store.load()
        return stored if stored is not None else NotStarted()

    def record_activity(self) -> StreakState:
        """Count a study activity happening now and return the new state."""
        with self._lock:
            previous = self.store.load()
            updated = advance_streak(previous, self.clock.now(), self.clock)
            if updated is not previous:
                self.store.save(updated)
                logger.debug(
                    "Streak updated: current={}, longest={}",
                    updated.current_streak,
                    updated.longest_streak,
                )
            return updated
