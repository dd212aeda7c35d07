"""
Interval Calculator - days until the next progressive review.

interval = base(mastery) * score adjustment * pattern adjustment,
clamped to [1, 365] and rounded half away from zero.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from recall_engine.core.models import ReviewHistoryEntry
from recall_engine.core.numeric import band_value, clamp, clamp_score, round_half_away_from_zero

# Base interval in days, indexed by mastery level 0-12
MASTERY_INTERVALS = (1.0, 1.5, 2.5, 4.0, 6.0, 9.0, 13.0, 20.0, 30.0, 45.0, 65.0, 90.0, 120.0)

SCORE_ADJUSTMENTS = (
    (95, 1.3),
    (85, 1.2),
    (75, 1.1),
    (65, 1.05),
    (55, 1.0),
    (45, 0.95),
    (35, 0.9),
)
DEFAULT_SCORE_ADJUSTMENT = 0.8

PATTERN_WINDOW = 3
STRONG_PATTERN_THRESHOLD = 65
STRONG_PATTERN_BONUS = 1.1
STEADY_PATTERN_THRESHOLD = 50
STEADY_PATTERN_BONUS = 1.05

MIN_INTERVAL_DAYS = 1.0
MAX_INTERVAL_DAYS = 365.0


@dataclass(frozen=True)
class IntervalBreakdown:
    """Every factor that went into an interval, for display."""

    mastery_level: int
    base_interval: float
    score_adjustment: float
    pattern_adjustment: float
    raw_interval: float
    final_interval: float
    days: int


def base_interval_for_level(level: int) -> float:
    index = max(0, min(level, len(MASTERY_INTERVALS) - 1))
    return MASTERY_INTERVALS[index]


def score_adjustment(recall_score: int) -> float:
    return band_value(clamp_score(recall_score), SCORE_ADJUSTMENTS, DEFAULT_SCORE_ADJUSTMENT)


def pattern_adjustment(history: Sequence[ReviewHistoryEntry]) -> float:
    """Reward sustained recent performance across the last three reviews."""
    if not history:
        return 1.0

    recent = [clamp_score(entry.recall_score) for entry in history[:PATTERN_WINDOW]]

    if all(score >= STRONG_PATTERN_THRESHOLD for score in recent):
        return STRONG_PATTERN_BONUS
    elif len(recent) >= 2 and all(score >= STEADY_PATTERN_THRESHOLD for score in recent):
        return STEADY_PATTERN_BONUS
    return 1.0


def interval_breakdown(
    level: int,
    recall_score: int,
    history: Sequence[ReviewHistoryEntry] = (),
) -> IntervalBreakdown:
    base = base_interval_for_level(level)
    score_adj = score_adjustment(recall_score)
    pattern_adj = pattern_adjustment(history)

    raw = base * score_adj * pattern_adj
    final = clamp(raw, MIN_INTERVAL_DAYS, MAX_INTERVAL_DAYS)

    return IntervalBreakdown(
        mastery_level=level,
        base_interval=base,
        score_adjustment=score_adj,
        pattern_adjustment=pattern_adj,
        raw_interval=raw,
        final_interval=final,
        days=round_half_away_from_zero(final),
    )


def interval_days(
    level: int,
    recall_score: int,
    history: Sequence[ReviewHistoryEntry] = (),
) -> int:
    """Days to add for a progressive review. Always in [1, 365]."""
    return interval_breakdown(level, recall_score, history).days
