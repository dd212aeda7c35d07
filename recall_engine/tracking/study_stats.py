"""
Study Stats Calculator - totals derived from recorded learning activities.

Pure functions over a sequence of LearningActivity; "today" and the week
boundaries come from the injected clock. Weeks start on Monday.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from recall_engine.core.models import LearningActivity
from recall_engine.core.ports import IClock

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class UserStudyStats:
    total_minutes: int
    this_week_minutes: int
    streak_days: int


@dataclass(frozen=True)
class DailySessionStats:
    today_review_count: int
    today_study_minutes: int
    review_rate: float
    pending_review_count: int


@dataclass(frozen=True)
class DailyStudyData:
    date: datetime
    review_count: int
    study_minutes: int


@dataclass(frozen=True)
class WeeklyStats:
    week_start: datetime
    daily_data: list[DailyStudyData]
    total_reviews: int
    total_minutes: int
    average_daily: int


def _minutes(activities: Sequence[LearningActivity]) -> int:
    return sum(activity.duration_minutes for activity in activities)


def _day_of(activity: LearningActivity, clock: IClock) -> date:
    return clock.start_of_day(activity.date).date()


def week_start(clock: IClock) -> datetime:
    """Monday 00:00 of the current week."""
    today = clock.start_of_day(clock.now())
    return today - timedelta(days=today.weekday())


def total_study_minutes(activities: Sequence[LearningActivity]) -> int:
    return _minutes(activities)


def this_week_minutes(activities: Sequence[LearningActivity], clock: IClock) -> int:
    start = week_start(clock).date()
    return _minutes([a for a in activities if _day_of(a, clock) >= start])


def study_streak_days(activities: Sequence[LearningActivity], clock: IClock) -> int:
    """
    Consecutive days with at least one activity.

    The run ends today, or yesterday when nothing has been recorded today
    yet; any missing day before that ends the streak.
    """
    active_days = {_day_of(activity, clock) for activity in activities}
    if not active_days:
        return 0

    cursor = clock.start_of_day(clock.now()).date()
    if cursor not in active_days:
        cursor -= timedelta(days=1)

    streak = 0
    while cursor in active_days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def daily_session_stats(
    activities: Sequence[LearningActivity],
    due_count: int,
    clock: IClock,
) -> DailySessionStats:
    """
    Today's review figures.

    Args:
        activities: Recorded activities (any date range)
        due_count: Items currently due for review
        clock: Source of "today"
    """
    today = clock.start_of_day(clock.now()).date()
    todays = [a for a in activities if _day_of(a, clock) == today]
    due_count = max(0, due_count)

    return DailySessionStats(
        today_review_count=len(todays),
        today_study_minutes=_minutes(todays),
        review_rate=len(todays) / due_count if due_count > 0 else 0.0,
        pending_review_count=max(0, due_count - len(todays)),
    )


def weekly_stats(activities: Sequence[LearningActivity], clock: IClock) -> WeeklyStats:
    """Per-day breakdown of the current week, Monday first."""
    start = week_start(clock)
    in_week = [a for a in activities if _day_of(a, clock) >= start.date()]

    daily_data = []
    for offset in range(DAYS_PER_WEEK):
        day = start + timedelta(days=offset)
        day_activities = [a for a in in_week if _day_of(a, clock) == day.date()]
        daily_data.append(
            DailyStudyData(
                date=day,
                review_count=len(day_activities),
                study_minutes=_minutes(day_activities),
            )
        )

    return WeeklyStats(
        week_start=start,
        daily_data=daily_data,
        total_reviews=len(in_week),
        total_minutes=_minutes(in_week),
        average_daily=len(in_week) // DAYS_PER_WEEK,
    )


def user_study_stats(activities: Sequence[LearningActivity], clock: IClock) -> UserStudyStats:
    return UserStudyStats(
        total_minutes=total_study_minutes(activities),
        this_week_minutes=this_week_minutes(activities, clock),
        streak_days=study_streak_days(activities, clock),
    )
