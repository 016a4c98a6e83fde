"""Display helpers for session durations and dates."""

import datetime
import math

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_duration(seconds: int | float) -> str:
    """Format elapsed seconds as "1h 1m", "1m 30s" or "45s".

    Seconds are dropped once the duration reaches an hour.
    """
    if isinstance(seconds, float):
        if not math.isfinite(seconds) or not seconds.is_integer():
            raise ValueError(f"Duration must be a whole number of seconds, got {seconds!r}")
        seconds = int(seconds)
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}")

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def format_session_date(date: datetime.date) -> str:
    """Format a session date as "Jan 15, 2024"."""
    return f"{_MONTHS[date.month - 1]} {date.day}, {date.year}"


def format_session_time(date: datetime.datetime | datetime.time) -> str:
    """Format a session time as "10:30 AM"."""
    hour = date.hour % 12 or 12
    suffix = "AM" if date.hour < 12 else "PM"
    return f"{hour}:{date.minute:02d} {suffix}"
