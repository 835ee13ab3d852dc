"""Named period intervals (tithi, nakshatra, yogam, karanam).

Parses lines like "Prathama: 2025/12/04 15:14 to 2025/12/05 11:26" into
intervals of local wall-clock time and provides helpers to find the interval
containing a given instant and the one listed after it.
"""

from __future__ import annotations

import re  # Line matching
from dataclasses import dataclass  # Lightweight interval representation
from datetime import datetime  # Local (naive) instants
from typing import Iterable, List, NamedTuple, Optional, Sequence  # Type hints

_INTERVAL_RE = re.compile(
    r"(.+?):\s*(\d{4})/(\d{2})/(\d{2}) (\d{2}):(\d{2}) to (\d{4})/(\d{2})/(\d{2}) (\d{2}):(\d{2})",
    re.ASCII,
)


def _make_local(y: str, mo: str, d: str, hh: str, mm: str) -> Optional[datetime]:
    """Build a naive local datetime from digit strings, or None if out of range."""
    try:
        return datetime(int(y), int(mo), int(d), int(hh), int(mm))
    except ValueError:
        return None


@dataclass(frozen=True)
class Interval:
    """Represents one named period.

    Start is inclusive, end is exclusive. `start < end` is not validated.
    """

    name: str
    start: datetime
    end: datetime

    def contains(self, now: datetime) -> bool:
        """Check if `now` lies inside this interval.

        Args:
          now: Local instant to check.

        Returns:
          True if `start <= now < end`; False otherwise.
        """
        return self.start <= now < self.end


class Resolution(NamedTuple):
    """Current interval and the one listed right after it (either may be None)."""

    current: Optional[Interval]
    next: Optional[Interval]


def parse_interval_line(line: str) -> Optional[Interval]:
    """Parse a single "<name>: YYYY/MM/DD HH:MM to YYYY/MM/DD HH:MM" line.

    Args:
      line: Raw line; surrounding whitespace is ignored.

    Returns:
      An `Interval`, or None if the line does not match exactly or a date/time
      component is out of range.
    """
    m = _INTERVAL_RE.fullmatch(str(line).strip())
    if not m:
        return None
    start = _make_local(*m.group(2, 3, 4, 5, 6))
    end = _make_local(*m.group(7, 8, 9, 10, 11))
    if start is None or end is None:
        return None
    return Interval(m.group(1).strip(), start, end)


def get_intervals_from_section(section_lines: Iterable[str]) -> List[Interval]:
    """Build intervals from section lines, in source order.

    Blank lines, "Next ..." annotation lines and unparseable lines are skipped.
    """
    intervals: List[Interval] = []
    for raw in section_lines:
        line = raw.strip()
        if not line:
            continue
        if line.lower().startswith("next "):  # e.g. "Next Tithi:"
            continue
        iv = parse_interval_line(line)
        if iv is not None:
            intervals.append(iv)
    return intervals


def find_current_and_next(intervals: Sequence[Interval], now: datetime) -> Resolution:
    """Find the first interval containing `now` and its positional successor.

    Order of `intervals` is trusted as given; no sorting by start time is done.
    If nothing contains `now`, both results are None.
    """
    for i, iv in enumerate(intervals):
        if iv.contains(now):
            nxt = intervals[i + 1] if i + 1 < len(intervals) else None
            return Resolution(iv, nxt)
    return Resolution(None, None)
