"""
Human-readable rendering for durations and start times.
"""

from datetime import datetime, timedelta

DEFAULT_TIME_FORMAT = "%H:%M:%S"


def format_duration(d: timedelta) -> str:
    """Largest nonzero unit leads, seconds always shown: 1h 2m 3s, 2m 3s, 3s."""
    micros = d // timedelta(microseconds=1)
    if micros <= 0:
        return "0s"
    total = (micros + 500_000) // 1_000_000
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    if h > 0:
        return f"{h}h {m}m {s}s"
    if m > 0:
        return f"{m}m {s}s"
    return f"{s}s"


def format_clock(dt: datetime, fmt: str = DEFAULT_TIME_FORMAT) -> str:
    return dt.strftime(fmt)
