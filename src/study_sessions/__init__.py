"""
study-sessions — track study sessions and the time spent on each subject.

In-memory session ledger with an interactive terminal menu.
"""

from study_sessions.clock import Clock, FixedClock, system_clock
from study_sessions.errors import SessionNotFoundError, StudySessionError
from study_sessions.ledger import SessionLedger
from study_sessions.models.session import Session, Subject

__version__ = "0.1.0"
__all__ = [
    "SessionLedger",
    "Session",
    "Subject",
    "Clock",
    "FixedClock",
    "system_clock",
    "StudySessionError",
    "SessionNotFoundError",
]
