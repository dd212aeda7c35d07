"""
RecallMate Engine - spaced-repetition scheduling for a personal study tracker.

Subpackages:
- core: domain types, collaborator interfaces, numeric helpers
- study: retention, mastery, interval and review-date calculation
- tracking: streaks, timed study sessions, study stats and daily goals
- cli: developer command line over the engine
"""

__version__ = "1.0.0"
