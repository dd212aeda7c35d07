"""
Tracking Module - habit and time bookkeeping around reviews.

Components:
- streak_tracker: consecutive active days
- timing_session: wall-clock duration of study sessions
- study_stats: totals and weekly breakdowns over recorded activities
- study_goal: daily study-time goal and goal streak
"""

from recall_engine.tracking.streak_tracker import (
    InMemoryStreakStore,
    StreakTracker,
    advance_streak,
)
from recall_engine.tracking.study_goal import GoalStreakState, StudyGoalTracker
from recall_engine.tracking.study_stats import (
    DailySessionStats,
    DailyStudyData,
    UserStudyStats,
    WeeklyStats,
    daily_session_stats,
    user_study_stats,
    weekly_stats,
)
from recall_engine.tracking.timing_session import TimingSessionTracker

__all__ = [
    "DailySessionStats",
    "DailyStudyData",
    "GoalStreakState",
    "InMemoryStreakStore",
    "StreakTracker",
    "StudyGoalTracker",
    "TimingSessionTracker",
    "UserStudyStats",
    "WeeklyStats",
    "advance_streak",
    "daily_session_stats",
    "user_study_stats",
    "weekly_stats",
]
