"""
Review Scheduler - next review date for an item.

Two independent algorithms, chosen once per call:
- FirstTimeStrategy: new learning (no perfect recalls yet). A fixed
  score-band table, blind to mastery and history.
- ProgressiveStrategy: ongoing review. Mastery level from the history,
  then the interval calculator.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Union

from loguru import logger

from recall_engine.core.clock import SystemClock
from recall_engine.core.models import ReviewHistoryEntry, SchedulableItem
from recall_engine.core.numeric import band_value, clamp_score, round_half_away_from_zero
from recall_engine.core.ports import IClock, IHistoryProvider
from recall_engine.study.interval_calculator import interval_days
from recall_engine.study.mastery_evaluator import mastery_level

# First-time learning: base days by score band
FIRST_TIME_BASE_DAYS = (
    (95, 14.0),
    (85, 10.0),
    (75, 7.0),
    (65, 5.0),
    (55, 3.0),
    (45, 2.0),
    (35, 1.5),
)
DEFAULT_FIRST_TIME_BASE_DAYS = 1.0

# First-time learning: fine adjustment by score band
FIRST_TIME_SCORE_FACTORS = (
    (90, 1.2),
    (80, 1.1),
    (70, 1.0),
    (60, 0.9),
    (50, 0.8),
)
DEFAULT_FIRST_TIME_SCORE_FACTOR = 0.7


@dataclass(frozen=True)
class FirstTimeStrategy:
    """Item has no perfect-recall credit yet."""


@dataclass(frozen=True)
class ProgressiveStrategy:
    """Item has prior perfect-recall credit; history drives the interval."""

    history: tuple[ReviewHistoryEntry, ...] = field(default_factory=tuple)


SchedulingStrategy = Union[FirstTimeStrategy, ProgressiveStrategy]


def resolve_strategy(
    perfect_recall_count: int,
    history: Sequence[ReviewHistoryEntry] | None = None,
) -> SchedulingStrategy:
    """Pick the algorithm. History length plays no part in the choice."""
    if perfect_recall_count <= 0:
        return FirstTimeStrategy()
    return ProgressiveStrategy(history=tuple(history or ()))


def first_time_days(recall_score: int) -> int:
    score = clamp_score(recall_score)
    base_days = band_value(score, FIRST_TIME_BASE_DAYS, DEFAULT_FIRST_TIME_BASE_DAYS)
    factor = band_value(score, FIRST_TIME_SCORE_FACTORS, DEFAULT_FIRST_TIME_SCORE_FACTOR)
    return round_half_away_from_zero(base_days * factor)


def progressive_days(recall_score: int, history: Sequence[ReviewHistoryEntry]) -> int:
    level = mastery_level(recall_score, history)
    return interval_days(level, recall_score, history)


def days_until_next_review(recall_score: int, strategy: SchedulingStrategy) -> int:
    if isinstance(strategy, ProgressiveStrategy):
        return progressive_days(recall_score, strategy.history)
    return first_time_days(recall_score)


def next_review_date(
    recall_score: int,
    last_reviewed_date: datetime | None,
    perfect_recall_count: int,
    history: Sequence[ReviewHistoryEntry] | None = None,
    clock: IClock | None = None,
) -> datetime:
    """
    Compute when an item should next be reviewed.

    Args:
        recall_score: Current recall score (0-100)
        last_reviewed_date: Anchor date; "now" when the item was never reviewed
        perfect_recall_count: Zero selects the first-time algorithm
        history: Past reviews, most recent first (progressive path only)
        clock: Source of "now"; the system clock if omitted

    Returns:
        Anchor date plus the computed number of days
    """
    clock = clock or SystemClock()
    strategy = resolve_strategy(perfect_recall_count, history)
    days = days_until_next_review(recall_score, strategy)
    anchor = last_reviewed_date if last_reviewed_date is not None else clock.now()

    logger.debug(
        "Scheduled review: strategy={}, score={}, days={}",
        type(strategy).__name__,
        recall_score,
        days,
    )
    return clock.add_days(anchor, days)


class ReviewScheduler:
    """
    Schedules items against an injected clock.

    Holds no state besides its collaborators; safe to share between callers.
    """

    def __init__(
        self,
        clock: IClock | None = None,
        history_provider: IHistoryProvider | None = None,
    ):
        self.clock = clock or SystemClock()
        self.history_provider = history_provider

    def next_review_date(
        self,
        item: SchedulableItem,
        history: Sequence[ReviewHistoryEntry] | None = None,
    ) -> datetime:
        return next_review_date(
            recall_score=item.recall_score,
            last_reviewed_date=item.last_reviewed_date,
            perfect_recall_count=item.perfect_recall_count,
            history=history,
            clock=self.clock,
        )

    def schedule(
        self,
        item: SchedulableItem,
        history: Sequence[ReviewHistoryEntry] | None = None,
    ) -> SchedulableItem:
        """Return a copy of ``item`` with ``next_review_date`` filled in."""
        return replace(item, next_review_date=self.next_review_date(item, history))

    def schedule_item(self, item_id: str, item: SchedulableItem) -> SchedulableItem:
        """Schedule ``item`` with the history supplied for ``item_id``."""
        if self.history_provider is None:
            raise ValueError("schedule_item requires a history provider")
        return self.schedule(item, self.history_provider.history_for(item_id))
