"""Display helpers for dates, times and remaining durations."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

_HMS_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})", re.ASCII)
_MINUTE = timedelta(minutes=1)
_MILLISECOND = timedelta(milliseconds=1)


def format_date_time(dt: datetime) -> str:
    """Format like the panchangam text: "YYYY/MM/DD HH:MM"."""
    return f"{format_date_ymd(dt)} {dt.hour:02d}:{dt.minute:02d}"


def format_date_ymd(dt: date) -> str:
    """Format as "YYYY/MM/DD"; also used as the day-record key."""
    return f"{dt.year}/{dt.month:02d}/{dt.day:02d}"


def format_hms(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def parse_hms(text: str) -> Optional[Tuple[int, int, int]]:
    """Parse "HH:MM:SS" into (hours, minutes, seconds), or None."""
    m = _HMS_RE.fullmatch(str(text).strip())
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def format_time_remaining(end: datetime, now: datetime) -> str:
    """Describe the time left until `end` in whole hours and minutes."""
    left = end - now
    if left <= timedelta(0):
        return "Ended just now"

    total_minutes = left // _MINUTE
    hours, minutes = divmod(total_minutes, 60)

    if hours == 0 and minutes == 0:
        return "Ending now"
    if hours == 0:
        return f"{minutes} minutes remaining"
    if minutes == 0:
        return f"{hours} hours remaining"
    return f"{hours} hours {minutes} minutes remaining"


def _at(day: date, hms: Optional[Tuple[int, int, int]]) -> Optional[datetime]:
    if hms is None:
        return None
    try:
        return datetime.combine(day, time(*hms))
    except ValueError:  # e.g. "25:00:00"
        return None


def compute_noon(day: date, sunrise: str, sunset: str) -> Optional[datetime]:
    """Return the local midpoint between sunrise and sunset on `day`.

    The half-span is floored to whole milliseconds. Returns None when either
    time is not a valid "HH:MM:SS".
    """
    rise = _at(day, parse_hms(sunrise))
    set_ = _at(day, parse_hms(sunset))
    if rise is None or set_ is None:
        return None
    half_ms = ((set_ - rise) // _MILLISECOND) // 2
    return rise + half_ms * _MILLISECOND
