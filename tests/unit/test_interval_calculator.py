"""
Unit tests for the interval calculator.
"""

import pytest

from recall_engine.study.interval_calculator import (
    MASTERY_INTERVALS,
    base_interval_for_level,
    interval_breakdown,
    interval_days,
    pattern_adjustment,
    score_adjustment,
)


class TestBaseInterval:
    def test_table_is_increasing(self):
        assert list(MASTERY_INTERVALS) == sorted(MASTERY_INTERVALS)
        assert len(MASTERY_INTERVALS) == 13

    def test_level_lookup(self):
        assert base_interval_for_level(0) == 1.0
        assert base_interval_for_level(8) == 30.0
        assert base_interval_for_level(12) == 120.0

    def test_out_of_range_level_is_clamped(self):
        assert base_interval_for_level(-3) == 1.0
        assert base_interval_for_level(40) == 120.0


class TestScoreAdjustment:
    @pytest.mark.parametrize(
        "score,factor",
        [
            (100, 1.3),
            (95, 1.3),
            (94, 1.2),
            (85, 1.2),
            (84, 1.1),
            (75, 1.1),
            (74, 1.05),
            (65, 1.05),
            (64, 1.0),
            (55, 1.0),
            (54, 0.95),
            (45, 0.95),
            (44, 0.9),
            (35, 0.9),
            (34, 0.8),
            (0, 0.8),
        ],
    )
    def test_bands(self, score, factor):
        assert score_adjustment(score) == factor


class TestPatternAdjustment:
    def test_empty_history(self):
        assert pattern_adjustment([]) == 1.0

    def test_strong_recent_run(self, make_history):
        assert pattern_adjustment(make_history(65, 90, 70, 10)) == 1.1

    def test_single_strong_entry_counts_as_strong(self, make_history):
        assert pattern_adjustment(make_history(80)) == 1.1

    def test_steady_recent_run(self, make_history):
        assert pattern_adjustment(make_history(50, 64, 90)) == 1.05

    def test_single_steady_entry_gets_no_bonus(self, make_history):
        assert pattern_adjustment(make_history(55)) == 1.0

    def test_weak_entry_breaks_pattern(self, make_history):
        assert pattern_adjustment(make_history(90, 49, 90)) == 1.0


class TestIntervalDays:
    def test_level_eight_high_score_no_history(self):
        # 30 * 1.2 * 1.0 = 36
        assert interval_days(8, 90, []) == 36

    def test_top_level_stays_under_cap(self, make_history):
        # 120 * 1.3 * 1.1 = 171.6 -> 172, under the cap
        assert interval_days(12, 100, make_history(100, 100, 100)) == 172

    def test_lower_bound(self):
        # 1.0 * 0.8 = 0.8 -> clamped to 1
        assert interval_days(0, 10, []) == 1

    def test_rounds_half_away_from_zero(self):
        # 2.5 * 1.0 = 2.5 -> 3 (banker's rounding would give 2)
        assert interval_days(2, 60, []) == 3

    def test_breakdown_fields(self, make_history):
        breakdown = interval_breakdown(5, 80, make_history(60, 55))
        assert breakdown.base_interval == 9.0
        assert breakdown.score_adjustment == 1.1
        assert breakdown.pattern_adjustment == 1.05
        assert breakdown.raw_interval == pytest.approx(9.0 * 1.1 * 1.05)
        assert breakdown.days == 10

    @pytest.mark.parametrize("score", [0, 40, 60, 85, 100])
    def test_monotonic_in_level_and_in_range(self, make_history, score):
        for history in ([], make_history(70, 70, 70), make_history(55, 55)):
            days = [interval_days(level, score, history) for level in range(13)]
            assert days == sorted(days)
            assert all(1 <= d <= 365 for d in days)
