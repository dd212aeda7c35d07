"""
Domain models for the scheduling engine.

These are pure data structures with no I/O. Every instance is owned by the
caller; the engine never keeps references between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class ReviewHistoryEntry:
    """
    One past review of an item.

    Attributes:
        recall_score: Self-reported recall quality at that review (0-100).
        date: When the review happened.
    """

    recall_score: int
    date: datetime


@dataclass(frozen=True)
class SchedulableItem:
    """
    Fields of a learning item that the scheduler reads.

    Attributes:
        recall_score: Current self-reported recall (0-100).
        last_reviewed_date: None if the item was never reviewed.
        perfect_recall_count: High-quality reviews so far. Zero marks an
            item as new learning rather than ongoing review.
        next_review_date: Output of the scheduler.
    """

    recall_score: int
    last_reviewed_date: datetime | None = None
    perfect_recall_count: int = 0
    next_review_date: datetime | None = None


# =============================================================================
# STREAK STATE
# =============================================================================


@dataclass(frozen=True)
class NotStarted:
    """No qualifying activity has ever been counted."""

    longest_streak: int = 0

    @property
    def current_streak(self) -> int:
        return 0

    @property
    def last_active_date(self) -> datetime | None:
        return None

    @property
    def streak_start_date(self) -> datetime | None:
        return None


@dataclass(frozen=True)
class ActiveStreak:
    """At least one activity has been counted."""

    current_streak: int
    longest_streak: int
    last_active_date: datetime
    streak_start_date: datetime


StreakState = Union[NotStarted, ActiveStreak]


# =============================================================================
# ACTIVITY
# =============================================================================


class ActivityType(str, Enum):
    """Kind of study activity a timed session is recorded as."""

    READING = "reading"
    EXERCISE = "exercise"
    LECTURE = "lecture"
    TEST = "test"
    PROJECT = "project"
    EXPERIMENT = "experiment"
    REVIEW = "review"
    OTHER = "other"


@dataclass(frozen=True)
class TimingSession:
    """An open timing session. Lives only in memory."""

    session_id: str
    start_time: datetime


@dataclass(frozen=True)
class LearningActivity:
    """A completed study activity, ready for the caller to persist."""

    activity_type: ActivityType
    duration_seconds: int
    date: datetime
    note: str | None = None

    @property
    def duration_minutes(self) -> int:
        """Whole minutes, rounded up (61 seconds counts as 2 minutes)."""
        return math.ceil(self.duration_seconds / 60)
