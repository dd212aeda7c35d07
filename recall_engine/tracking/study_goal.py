"""
Study Goal Tracker - daily study-time goal and its own streak.

The goal streak is evaluated once per calendar day, on the first check of
that day. Checks are driven by the caller; nothing here polls.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, replace
from datetime import datetime
from typing import TYPE_CHECKING

from loguru import logger

from recall_engine.core.clock import SystemClock
from recall_engine.core.ports import IClock

if TYPE_CHECKING:
    from recall_engine.config import Settings

DEFAULT_DAILY_GOAL_MINUTES = 60


@dataclass(frozen=True)
class GoalStreakState:
    """Goal streak bookkeeping, persisted by the caller."""

    current_streak: int = 0
    best_streak: int = 0
    last_check_date: datetime | None = None


class StudyGoalTracker:
    """Evaluates today's study time against a daily goal in minutes."""

    def __init__(
        self,
        clock: IClock | None = None,
        daily_goal_minutes: int = DEFAULT_DAILY_GOAL_MINUTES,
        enabled: bool = True,
        state: GoalStreakState | None = None,
    ):
        self.clock = clock or SystemClock()
        self.daily_goal_minutes = max(1, daily_goal_minutes)
        self.enabled = enabled
        self._state = state or GoalStreakState()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: IClock | None = None,
        state: GoalStreakState | None = None,
    ) -> StudyGoalTracker:
        return cls(
            clock=clock or settings.build_clock(),
            daily_goal_minutes=settings.daily_goal_minutes,
            enabled=settings.goal_enabled,
            state=state,
        )

    @property
    def state(self) -> GoalStreakState:
        with self._lock:
            return self._state

    def update_daily_goal(self, minutes: int) -> None:
        self.daily_goal_minutes = max(1, minutes)

    def toggle_goal(self, enabled: bool) -> None:
        self.enabled = enabled

    def check_goal_achievement(self, today_study_seconds: int) -> bool:
        """
        Whether today's study time meets the goal.

        Partial minutes round up. The first check of each day also moves
        the goal streak forward (goal met) or resets it (goal missed).
        """
        if not self.enabled:
            return False

        today_minutes = math.ceil(max(0, today_study_seconds) / 60)
        achieved = today_minutes >= self.daily_goal_minutes

        with self._lock:
            self._state = self._advance(self._state, achieved)
        return achieved

    def _advance(self, state: GoalStreakState, achieved: bool) -> GoalStreakState:
        now = self.clock.now()

        if state.last_check_date is None:
            current = 1 if achieved else 0
            return GoalStreakState(current_streak=current, best_streak=current, last_check_date=now)

        if self.clock.day_difference(state.last_check_date, now) <= 0:
            return state

        if achieved:
            current = state.current_streak + 1
            logger.debug("Daily goal met; goal streak now {}", current)
            return GoalStreakState(
                current_streak=current,
                best_streak=max(state.best_streak, current),
                last_check_date=now,
            )

        logger.debug("Daily goal missed; goal streak reset")
        return replace(state, current_streak=0, last_check_date=now)

    def achievement_rate(self, today_study_seconds: int) -> float:
        """Fraction of the goal reached today, capped at 1.0."""
        if not self.enabled:
            return 0.0
        rate = (max(0, today_study_seconds) / 60) / self.daily_goal_minutes
        return min(rate, 1.0)
