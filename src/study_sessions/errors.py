"""
Study session error types.
"""

from typing import Any, Optional


class StudySessionError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class SessionNotFoundError(StudySessionError):
    """No session with the given id, or none eligible for the operation."""

    def __init__(self, session_id: int, message: Optional[str] = None):
        super().__init__(
            "session_not_found",
            message or f"session with ID {session_id} not found",
            {"session_id": session_id},
        )
        self.session_id = session_id
