"""
Core Module - Shared domain models and interfaces.

Components:
- models: review history, schedulable items, streak and activity records
- ports: collaborator interfaces (clock, history provider, streak store)
- clock: system and fixed clocks
- numeric: clamping and rounding helpers
"""

from recall_engine.core.clock import FixedClock, SystemClock
from recall_engine.core.models import (
    ActiveStreak,
    ActivityType,
    LearningActivity,
    NotStarted,
    ReviewHistoryEntry,
    SchedulableItem,
    StreakState,
    TimingSession,
)
from recall_engine.core.ports import IClock, IHistoryProvider, IStreakStore

__all__ = [
    "ActiveStreak",
    "ActivityType",
    "FixedClock",
    "IClock",
    "IHistoryProvider",
    "IStreakStore",
    "LearningActivity",
    "NotStarted",
    "ReviewHistoryEntry",
    "SchedulableItem",
    "StreakState",
    "SystemClock",
    "TimingSession",
]
