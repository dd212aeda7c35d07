"""
Mastery Evaluator - integer mastery level (0-12) for an item.

Points accumulate from the current score band and, once a review history
exists, from three history sub-scores:
- historical progress (layered credit across overlapping score bands)
- consistency of the most recent reviews
- improvement of the current score over the recent average

Without history the level tops out at 8.
"""

from __future__ import annotations

from collections.abc import Sequence

from recall_engine.core.models import ReviewHistoryEntry
from recall_engine.core.numeric import band_value, clamp_score

MIN_MASTERY_LEVEL = 0
MAX_MASTERY_LEVEL = 12

# (lower_bound, points) - highest band first
SCORE_BAND_POINTS = (
    (90, 8),
    (80, 6),
    (70, 4),
    (60, 2),
    (50, 1),
)

# Historical progress bands overlap on purpose: a 90 counts as excellent,
# good and fair at once.
EXCELLENT_THRESHOLD = 85
GOOD_THRESHOLD = 70
FAIR_THRESHOLD = 55
MAX_HISTORICAL_POINTS = 6

CONSISTENCY_MIN_ENTRIES = 3
CONSISTENCY_WINDOW = 5
IMPROVEMENT_MIN_ENTRIES = 2
IMPROVEMENT_WINDOW = 3


def _scores(history: Sequence[ReviewHistoryEntry]) -> list[int]:
    return [clamp_score(entry.recall_score) for entry in history]


def score_band_points(current_score: int) -> int:
    return int(band_value(clamp_score(current_score), SCORE_BAND_POINTS, 0))


def historical_progress_points(history: Sequence[ReviewHistoryEntry]) -> int:
    """min(6, excellent*2 + good + fair // 2) over the full history."""
    scores = _scores(history)
    excellent = sum(1 for s in scores if s >= EXCELLENT_THRESHOLD)
    good = sum(1 for s in scores if s >= GOOD_THRESHOLD)
    fair = sum(1 for s in scores if s >= FAIR_THRESHOLD)
    return min(MAX_HISTORICAL_POINTS, excellent * 2 + good + fair // 2)


def consistency_points(history: Sequence[ReviewHistoryEntry]) -> int:
    """+2 / +1 / 0 from the mean of the five most recent scores."""
    if len(history) < CONSISTENCY_MIN_ENTRIES:
        return 0

    recent = _scores(history[:CONSISTENCY_WINDOW])
    average = sum(recent) / len(recent)

    if average >= 70:
        return 2
    elif average >= 55:
        return 1
    return 0


def improvement_points(current_score: int, history: Sequence[ReviewHistoryEntry]) -> int:
    """
    Credit for beating the average of the three most recent reviews.

    Bands are half-open: [10, inf) -> 3, [5, 10) -> 2, [0, 5) -> 1,
    negative -> 0.
    """
    if len(history) < IMPROVEMENT_MIN_ENTRIES:
        return 0

    recent = _scores(history[:IMPROVEMENT_WINDOW])
    improvement = clamp_score(current_score) - sum(recent) / len(recent)

    if improvement >= 10:
        return 3
    elif improvement >= 5:
        return 2
    elif improvement >= 0:
        return 1
    return 0


def mastery_level(current_score: int, history: Sequence[ReviewHistoryEntry] = ()) -> int:
    """
    Compute the mastery level for an item.

    Args:
        current_score: Current recall score (0-100)
        history: Past reviews, most recent first

    Returns:
        Mastery level in [0, 12]
    """
    points = score_band_points(current_score)

    if history:
        points += historical_progress_points(history)
        points += consistency_points(history)
        points += improvement_points(current_score, history)

    return max(MIN_MASTERY_LEVEL, min(MAX_MASTERY_LEVEL, points))
