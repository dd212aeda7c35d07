"""
Unit tests for calendar arithmetic and numeric helpers.
"""

from datetime import datetime

import pytest

from recall_engine.core.clock import FixedClock, SystemClock
from recall_engine.core.numeric import band_value, clamp_score, round_half_away_from_zero


class TestClock:
    def test_day_difference_is_calendar_based(self):
        clock = SystemClock()
        assert clock.day_difference(datetime(2024, 3, 13, 23, 59), datetime(2024, 3, 14, 0, 1)) == 1
        assert clock.day_difference(datetime(2024, 3, 13, 0, 1), datetime(2024, 3, 13, 23, 59)) == 0
        assert clock.day_difference(datetime(2024, 3, 14), datetime(2024, 3, 12)) == -2

    def test_start_of_day(self):
        clock = SystemClock()
        assert clock.start_of_day(datetime(2024, 3, 13, 15, 30, 12, 999)) == datetime(2024, 3, 13)

    def test_fixed_clock_advance(self, base_time):
        clock = FixedClock(base_time)
        assert clock.now() == base_time
        assert clock.advance(days=2) == datetime(2024, 3, 15, 15, 30)
        assert clock.now() == datetime(2024, 3, 15, 15, 30)


class TestNumeric:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (4.5, 5), (16.8, 17), (-2.5, -3)],
    )
    def test_round_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected

    def test_clamp_score(self):
        assert clamp_score(-5) == 0
        assert clamp_score(105) == 100
        assert clamp_score(72.9) == 72

    def test_band_value(self):
        bands = ((90, "A"), (80, "B"))
        assert band_value(95, bands, "C") == "A"
        assert band_value(80, bands, "C") == "B"
        assert band_value(10, bands, "C") == "C"
