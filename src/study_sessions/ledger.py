"""
Session ledger — the in-memory store of study sessions.

Sessions are kept in creation order and never removed. Ending a session
mutates its record in place; every query hands back copies so callers
cannot reach into ledger state.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from study_sessions.clock import Clock, system_clock
from study_sessions.errors import SessionNotFoundError
from study_sessions.models.session import Session, Subject

logger = logging.getLogger(__name__)


class SessionLedger:
    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or system_clock
        self._sessions: list[Session] = []
        self._next_id = 1

    def now(self) -> datetime:
        return self._clock()

    def start_session(self, subject: Subject) -> Session:
        """Open a new session for subject. Never fails."""
        session = Session(
            id=self._next_id,
            subject=subject.model_copy(),
            start_time=self._clock(),
        )
        self._sessions.append(session)
        self._next_id += 1
        logger.debug("Started session %d for %r", session.id, subject.name)
        return session.model_copy(deep=True)

    def end_session(self, session_id: int, notes: str) -> None:
        """Close the active session with this id.

        Raises SessionNotFoundError when the id is unknown or already closed;
        the two cases are not told apart beyond the message.
        """
        for session in self._sessions:
            if session.id == session_id and session.is_active:
                # end_time never precedes start_time, even if the clock steps back
                end_time = max(self._clock(), session.start_time)
                session.end_time = end_time
                session.duration = end_time - session.start_time
                session.notes = notes
                session.completed = True
                logger.debug("Ended session %d after %s", session_id, session.duration)
                return

        logger.info("Rejected end for session %d", session_id)
        raise SessionNotFoundError(
            session_id, f"session with ID {session_id} not found or already completed"
        )

    def get_active_sessions(self) -> list[Session]:
        return [s.model_copy(deep=True) for s in self._sessions if s.is_active]

    def get_completed_sessions(self) -> list[Session]:
        return [s.model_copy(deep=True) for s in self._sessions if s.completed]

    def get_all_sessions(self) -> list[Session]:
        return [s.model_copy(deep=True) for s in self._sessions]

    def get_session_by_id(self, session_id: int) -> Session:
        for session in self._sessions:
            if session.id == session_id:
                return session.model_copy(deep=True)
        raise SessionNotFoundError(session_id)

    def get_total_study_time(self) -> timedelta:
        """Sum of completed durations. Active sessions count for nothing."""
        return sum((s.duration for s in self._sessions if s.completed), timedelta(0))

    def get_subject_study_time(self, subject_name: str) -> timedelta:
        """Completed time for an exact, case-sensitive subject name."""
        return sum(
            (s.duration for s in self._sessions if s.completed and s.subject.name == subject_name),
            timedelta(0),
        )

    def get_subject_names(self) -> list[str]:
        """Distinct subject names in first-seen order."""
        names: list[str] = []
        for session in self._sessions:
            if session.subject.name not in names:
                names.append(session.subject.name)
        return names
