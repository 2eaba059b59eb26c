"""
Time sources for the ledger.

A clock is any zero-argument callable returning a local wall-clock datetime.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now()


class FixedClock:
    """Settable clock. Time only moves when advance() or set() is called."""

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime(2024, 1, 1, 9, 0, 0)

    def __call__(self) -> datetime:
        return self._now

    def advance(self, **kwargs: float) -> datetime:
        self._now += timedelta(**kwargs)
        return self._now

    def set(self, value: datetime) -> None:
        self._now = value
