"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from recall_engine.core.clock import FixedClock  # noqa: E402
from recall_engine.core.models import ReviewHistoryEntry  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


# A Wednesday, mid-afternoon
BASE_TIME = datetime(2024, 3, 13, 15, 30, 0)


@pytest.fixture
def base_time():
    return BASE_TIME


@pytest.fixture
def clock():
    """Clock frozen at BASE_TIME."""
    return FixedClock(BASE_TIME)


@pytest.fixture
def make_history():
    """Build history entries from scores, most recent first, one day apart."""

    def _make(*scores: int, anchor: datetime = BASE_TIME) -> list[ReviewHistoryEntry]:
        return [
            ReviewHistoryEntry(recall_score=score, date=anchor - timedelta(days=i + 1))
            for i, score in enumerate(scores)
        ]

    return _make
