"""
Timing Session Tracker - wall-clock duration of study sessions.

Sessions live only in memory between ``start`` and ``end``. Ending or
peeking an unknown session returns zero instead of raising: duplicate
end calls are expected when the UI retries or is dismissed mid-flight.
"""

from __future__ import annotations

import threading
import uuid

from loguru import logger

from recall_engine.core.clock import SystemClock
from recall_engine.core.models import ActivityType, LearningActivity, TimingSession
from recall_engine.core.ports import IClock

# A recorded session is never shorter than this, so a finished session
# cannot be confused with "no session".
MIN_RECORDED_SECONDS = 1


class TimingSessionTracker:
    """Tracks open timing sessions keyed by an opaque token."""

    def __init__(self, clock: IClock | None = None):
        self.clock = clock or SystemClock()
        self._sessions: dict[str, TimingSession] = {}
        self._lock = threading.Lock()

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def start(self) -> str:
        """Open a session and return its id."""
        session = TimingSession(session_id=uuid.uuid4().hex, start_time=self.clock.now())
        with self._lock:
            self._sessions[session.session_id] = session
        logger.debug("Timing session {} started", session.session_id)
        return session.session_id

    def _elapsed_seconds(self, session: TimingSession) -> int:
        return int((self.clock.now() - session.start_time).total_seconds())

    def end(self, session_id: str) -> int:
        """
        Close a session.

        Returns:
            Whole seconds elapsed, at least 1; 0 if the session is unknown
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)

        if session is None:
            logger.debug("Timing session {} not active; ignoring end", session_id)
            return 0

        duration = max(MIN_RECORDED_SECONDS, self._elapsed_seconds(session))
        logger.debug("Timing session {} ended after {}s", session_id, duration)
        return duration

    def peek(self, session_id: str) -> int:
        """Elapsed whole seconds without ending the session (0 if unknown)."""
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            return 0
        return max(0, self._elapsed_seconds(session))

    def is_active(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def complete(
        self,
        session_id: str,
        activity_type: ActivityType = ActivityType.REVIEW,
        note: str | None = None,
    ) -> LearningActivity | None:
        """
        End a session and turn it into an activity record.

        The caller persists the returned record. None if the session is unknown.
        """
        ended_at = self.clock.now()
        duration = self.end(session_id)
        if duration == 0:
            return None

        return LearningActivity(
            activity_type=activity_type,
            duration_seconds=duration,
            date=ended_at,
            note=note,
        )
