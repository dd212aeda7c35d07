"""
Retention Calculator - estimated memory strength of an item right now.

Two interchangeable strategies:
1. Simple - current recall plus a flat bonus per perfect recall.
2. Enhanced - forgetting-curve decay flattened by repetition and by a
   track record of high-quality recalls.

Both return an integer 0-100 and never raise; out-of-range inputs are
clamped.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from recall_engine.core.models import ReviewHistoryEntry, SchedulableItem
from recall_engine.core.numeric import clamp, clamp_score, non_negative
from recall_engine.core.ports import IClock

if TYPE_CHECKING:
    from recall_engine.config import Settings

# =============================================================================
# DECAY MODEL CONSTANTS
# =============================================================================

FORGETTING_RATE = 0.05  # per day
REVIEW_EFFECT_PER_REVIEW = 0.15
MAX_REVIEW_EFFECT = 0.75
STABILIZATION_PER_HIGH_SCORE = 4.0
MAX_STABILIZATION_BONUS = 20.0

SIMPLE_SCORE_WEIGHT = 0.8
SIMPLE_PERFECT_RECALL_BONUS = 5.0

DEFAULT_HIGH_SCORE_THRESHOLD = 80


def simple_retention(recall_score: int, perfect_recall_count: int) -> int:
    """
    Quick retention estimate used for legacy display.

    retention = min(100, score * 0.8 + perfect_recall_count * 5), truncated.
    """
    score = clamp_score(recall_score)
    bonus = non_negative(perfect_recall_count) * SIMPLE_PERFECT_RECALL_BONUS
    return int(min(100.0, score * SIMPLE_SCORE_WEIGHT + bonus))


def enhanced_retention(
    recall_score: int,
    days_since_last_review: int,
    review_count: int,
    high_score_count: int,
) -> int:
    """
    Retention estimate from the decay model.

    Formula:
        multiplier = e^(-0.05 * days)
        review_effect = min(0.75, reviews * 0.15)
        bonus = min(20, high_scores * 4)
        retention = clamp(score * (multiplier + review_effect) + bonus, 0, 100)

    Args:
        recall_score: Current self-reported recall (0-100)
        days_since_last_review: Calendar days since the last review
        review_count: Number of reviews so far
        high_score_count: Reviews at or above the "good recall" threshold

    Returns:
        Retention 0-100, truncated to an integer
    """
    score = clamp_score(recall_score)
    days = non_negative(days_since_last_review)

    retention_multiplier = math.exp(-FORGETTING_RATE * days)
    review_effect = min(MAX_REVIEW_EFFECT, non_negative(review_count) * REVIEW_EFFECT_PER_REVIEW)
    stabilization_bonus = min(
        MAX_STABILIZATION_BONUS,
        non_negative(high_score_count) * STABILIZATION_PER_HIGH_SCORE,
    )

    decayed_score = score * (retention_multiplier + review_effect)
    return int(clamp(decayed_score + stabilization_bonus, 0.0, 100.0))


def days_since_last_review(last_review_date: datetime | None, clock: IClock) -> int:
    """Calendar days between the last review and now (0 if never reviewed)."""
    if last_review_date is None:
        return 0
    return max(0, clock.day_difference(last_review_date, clock.now()))


def count_high_scores(
    history: Sequence[ReviewHistoryEntry],
    threshold: int = DEFAULT_HIGH_SCORE_THRESHOLD,
) -> int:
    """Count history entries scored at or above ``threshold``."""
    return sum(1 for entry in history if entry.recall_score >= threshold)


class RetentionCalculator:
    """
    Applies the retention strategies to items and their history.

    The "good recall" threshold is injected; `from_settings` reads it from
    `Settings.good_recall_threshold`.
    """

    def __init__(self, clock: IClock, high_score_threshold: int = DEFAULT_HIGH_SCORE_THRESHOLD):
        self.clock = clock
        self.high_score_threshold = high_score_threshold

    @classmethod
    def from_settings(cls, settings: Settings, clock: IClock | None = None) -> RetentionCalculator:
        return cls(
            clock=clock or settings.build_clock(),
            high_score_threshold=settings.good_recall_threshold,
        )

    def simple(self, item: SchedulableItem) -> int:
        return simple_retention(item.recall_score, item.perfect_recall_count)

    def enhanced(
        self,
        item: SchedulableItem,
        history: Sequence[ReviewHistoryEntry] = (),
    ) -> int:
        """Enhanced retention with days, review count and high scores derived from history."""
        return enhanced_retention(
            recall_score=item.recall_score,
            days_since_last_review=days_since_last_review(item.last_reviewed_date, self.clock),
            review_count=len(history),
            high_score_count=count_high_scores(history, self.high_score_threshold),
        )
