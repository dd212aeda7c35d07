"""Numeric helpers shared by the scheduling math."""

from __future__ import annotations

import math

MIN_SCORE = 0
MAX_SCORE = 100


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def clamp_score(score: int | float) -> int:
    """Clamp a recall score into [0, 100] and drop any fraction."""
    return int(clamp(int(score), MIN_SCORE, MAX_SCORE))


def non_negative(value: int) -> int:
    return max(0, int(value))


def round_half_away_from_zero(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Python's round() uses banker's rounding (round(4.5) == 4); day counts
    need 4.5 -> 5.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def band_value(score: int, bands: tuple[tuple[int, float], ...], default: float) -> float:
    """
    Look up ``score`` in a table of ``(lower_bound, value)`` pairs.

    Bands must be ordered from the highest lower bound down; the first
    bound the score reaches wins.
    """
    for lower_bound, value in bands:
        if score >= lower_bound:
            return value
    return default
