"""Date and time helpers"""
import time
from datetime import datetime, date, timezone, tzinfo
from typing import Optional


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds"""
    return int(time.time() * 1000)


def now_local() -> datetime:
    """Current time as an aware datetime in the server's local timezone"""
    return datetime.now(timezone.utc).astimezone()


def local_date(dt: datetime, tz: Optional[tzinfo] = None) -> date:
    """
    Calendar date of a datetime in the given timezone.

    Args:
        dt: datetime to convert (naive values are treated as UTC)
        tz: target timezone; None means the server's local timezone

    Returns:
        date: the calendar date as seen in the target timezone
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz).date()


def format_long_date(day: date) -> str:
    """
    Format a date for report headings.

    Returns:
        str: "Monday, October 19, 2026" style string
    """
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"


def format_duration(seconds: int) -> str:
    """
    Format a number of seconds as a short human-readable duration.

    Returns:
        str: "2h 5m", "45m" or "30s"
    """
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h {minutes}m"
    if minutes:
        return f"{minutes}m"
    return f"{secs}s"
