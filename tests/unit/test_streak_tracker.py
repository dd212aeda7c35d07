"""
Unit tests for the streak tracker.

Tests:
- Bootstrap from a missing record
- Same-day idempotence, next-day increment, reset after a gap
- Calendar-day (not 24h) boundaries
- Concurrent activity events
"""

import threading
from datetime import datetime, timedelta

import pytest

from recall_engine.core.clock import FixedClock
from recall_engine.core.models import ActiveStreak, NotStarted
from recall_engine.tracking.streak_tracker import (
    InMemoryStreakStore,
    StreakTracker,
    advance_streak,
)


@pytest.fixture
def store():
    return InMemoryStreakStore()


@pytest.fixture
def tracker(store, clock):
    return StreakTracker(store=store, clock=clock)


class TestBootstrap:
    def test_missing_record_starts_streak(self, tracker, store, base_time):
        state = tracker.record_activity()

        assert state == ActiveStreak(
            current_streak=1,
            longest_streak=1,
            last_active_date=base_time,
            streak_start_date=base_time,
        )
        assert store.load() == state

    def test_state_without_record_is_not_started(self, tracker):
        state = tracker.state
        assert isinstance(state, NotStarted)
        assert state.current_streak == 0
        assert state.last_active_date is None

    def test_not_started_keeps_longer_history(self, clock, base_time):
        state = advance_streak(NotStarted(longest_streak=9), base_time, clock)
        assert state.current_streak == 1
        assert state.longest_streak == 9


class TestTransitions:
    def test_same_day_is_idempotent(self, tracker, store, clock):
        first = tracker.record_activity()
        clock.advance(hours=3)
        second = tracker.record_activity()

        assert second == first
        assert store.load().last_active_date == first.last_active_date

    def test_next_day_increments(self, tracker, clock):
        tracker.record_activity()
        clock.advance(days=1)
        state = tracker.record_activity()

        assert state.current_streak == 2
        assert state.longest_streak == 2
        assert state.last_active_date == clock.now()

    def test_calendar_boundary_not_24_hours(self, store):
        clock = FixedClock(datetime(2024, 3, 13, 23, 50))
        tracker = StreakTracker(store=store, clock=clock)
        tracker.record_activity()

        clock.advance(minutes=20)  # 00:10 the next day
        assert tracker.record_activity().current_streak == 2

    def test_gap_resets_to_one(self, store, clock, base_time):
        three_days_ago = base_time - timedelta(days=3)
        store.save(
            ActiveStreak(
                current_streak=5,
                longest_streak=7,
                last_active_date=three_days_ago,
                streak_start_date=three_days_ago - timedelta(days=4),
            )
        )
        tracker = StreakTracker(store=store, clock=clock)

        state = tracker.record_activity()

        assert state.current_streak == 1
        assert state.longest_streak == 7
        assert state.streak_start_date == datetime(2024, 3, 13)
        assert state.last_active_date == base_time

    def test_longest_streak_tracks_maximum(self, tracker, clock):
        for _ in range(4):
            tracker.record_activity()
            clock.advance(days=1)
        clock.advance(days=2)
        state = tracker.record_activity()

        assert state.current_streak == 1
        assert state.longest_streak == 4

    def test_earlier_activity_leaves_state_unchanged(self, clock, base_time):
        state = ActiveStreak(3, 3, base_time, base_time - timedelta(days=2))
        assert advance_streak(state, base_time - timedelta(days=1), clock) is state

    def test_longest_never_below_current(self, tracker, clock):
        for days in (1, 1, 3, 1, 1, 1, 1, 5, 1):
            state = tracker.record_activity()
            assert state.longest_streak >= state.current_streak
            clock.advance(days=days)


class TestPersistence:
    def test_unchanged_state_is_not_saved_again(self, clock):
        class CountingStore(InMemoryStreakStore):
            saves = 0

            def save(self, state):
                CountingStore.saves += 1
                super().save(state)

        tracker = StreakTracker(store=CountingStore(), clock=clock)
        tracker.record_activity()
        tracker.record_activity()

        assert CountingStore.saves == 1

    def test_store_errors_propagate(self, clock):
        class BrokenStore(InMemoryStreakStore):
            def save(self, state):
                raise OSError("disk full")

        tracker = StreakTracker(store=BrokenStore(), clock=clock)
        with pytest.raises(OSError):
            tracker.record_activity()


class TestConcurrency:
    def test_simultaneous_activities_increment_once(self, store, clock, base_time):
        yesterday = base_time - timedelta(days=1)
        store.save(ActiveStreak(4, 4, yesterday, yesterday - timedelta(days=3)))
        tracker = StreakTracker(store=store, clock=clock)

        threads = [threading.Thread(target=tracker.record_activity) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.load().current_streak == 5
