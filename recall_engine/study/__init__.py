"""
Study Module - spaced-repetition scheduling math.

Provides:
- Retention estimates (simple and decay model)
- Mastery levels from review history
- Progressive review intervals
- Next review dates (first-time and progressive paths)
- Review dates leading up to a fixed test day

Everything here is pure and stateless.
"""

from recall_engine.study.interval_calculator import (
    IntervalBreakdown,
    interval_breakdown,
    interval_days,
)
from recall_engine.study.mastery_evaluator import mastery_level
from recall_engine.study.retention_calculator import (
    RetentionCalculator,
    enhanced_retention,
    simple_retention,
)
from recall_engine.study.review_scheduler import (
    FirstTimeStrategy,
    ProgressiveStrategy,
    ReviewScheduler,
    next_review_date,
    resolve_strategy,
)
from recall_engine.study.test_date_scheduler import (
    estimate_required_reviews,
    optimal_review_schedule,
    spaced_intervals,
)

__all__ = [
    "FirstTimeStrategy",
    "IntervalBreakdown",
    "ProgressiveStrategy",
    "RetentionCalculator",
    "ReviewScheduler",
    "enhanced_retention",
    "estimate_required_reviews",
    "interval_breakdown",
    "interval_days",
    "mastery_level",
    "next_review_date",
    "optimal_review_schedule",
    "resolve_strategy",
    "simple_retention",
    "spaced_intervals",
]
