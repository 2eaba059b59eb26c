"""
Session models — subjects and the timed sessions studied against them.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel


class Subject(BaseModel):
    """The named topic a session is about. Aggregation keys on name only."""
    name: str
    description: str = ""

    model_config = {"frozen": True}


class Session(BaseModel):
    id: int
    subject: Subject
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: timedelta = timedelta(0)
    notes: str = ""
    completed: bool = False

    @property
    def is_active(self) -> bool:
        return not self.completed

    def elapsed(self, now: datetime) -> timedelta:
        """Recorded duration once completed, otherwise time since start."""
        if self.completed:
            return self.duration
        return max(now - self.start_time, timedelta(0))
