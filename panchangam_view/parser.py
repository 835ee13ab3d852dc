"""Line classification, section extraction and day-record parsing.

The panchangam report is free-form text made of:

  * header lines such as "Samvatsaram : Vishwaavasu",
  * a "Date and time created: 2025/12/01 15:15:42" stamp,
  * sections introduced by "<Name> details:" lines, each followed by data
    lines until the next such header.

All functions here are total: malformed input yields None, an empty list or a
raw-text fallback, never an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_SECTION_HEADER_RE = re.compile(r"details\s*:$", re.IGNORECASE)
_DAY_LINE_RE = re.compile(r"^(\d{4}/\d{2}/\d{2})\s*:\s*(.+)$", re.ASCII)
_DAY_BODY_RE = re.compile(
    r"^([^,]+)\s*,\s*([^,]+)\s*,"
    r"\s*Sunrise:\s*([0-9]{2}:[0-9]{2}:[0-9]{2})\s*,"
    r"\s*Sunset:\s*([0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\s*,\s*Aparaanha\s+kaalam:\s*(.+))?\s*$",
    re.IGNORECASE,
)

BACKEND_TIMESTAMP_LABEL = "date and time created"


def split_lines(text: str) -> List[str]:
    """Split report text on LF or CRLF, keeping empty lines."""
    return _LINE_SPLIT_RE.split(text)


def is_section_header(line: str) -> bool:
    """Return True if the trimmed line ends with "details:" (any case)."""
    return bool(_SECTION_HEADER_RE.search(line.strip()))


def extract_section(lines: Sequence[str], start_label: str) -> List[str]:
    """Return the lines following the first line that starts with `start_label`.

    Collection stops before the next line that looks like a section header and
    does not itself start with `start_label`. Lines are returned unmodified.
    An absent label yields an empty list.
    """
    start_idx = next(
        (i for i, line in enumerate(lines) if line.strip().startswith(start_label)),
        None,
    )
    if start_idx is None:
        return []

    out: List[str] = []
    for line in lines[start_idx + 1:]:
        trimmed = line.strip()
        # Another section's header ends this one
        if is_section_header(trimmed) and not trimmed.startswith(start_label):
            break
        out.append(line)
    return out


def get_header_value(lines: Sequence[str], label: str) -> Optional[str]:
    """Get a "Label : Value" header value by case-insensitive prefix.

    The value is the text between the first and second colon, trimmed.
    """
    lower_label = label.lower()
    line = next((l for l in lines if l.strip().lower().startswith(lower_label)), None)
    if line is None:
        return None
    parts = line.split(":")
    if len(parts) < 2:
        return None
    return parts[1].strip()


def get_backend_timestamp(lines: Sequence[str]) -> Optional[str]:
    """Get the "Date and time created: ..." value with its internal colons intact."""
    line = next(
        (l for l in lines if l.strip().lower().startswith(BACKEND_TIMESTAMP_LABEL)),
        None,
    )
    if line is None:
        return None
    parts = line.split(":")
    if len(parts) < 2:
        return None
    return ":".join(parts[1:]).strip()


@dataclass(frozen=True)
class DayRecord:
    """Per-day sunrise/sunset details.

    Structured fields are None when the line only matched the date prefix; in
    that case `raw` is all there is to display. `aparahna` is None when the
    optional "Aparaanha kaalam" clause is absent.
    """

    raw: str
    weekday: Optional[str] = None
    vasaram: Optional[str] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    aparahna: Optional[str] = None

    @property
    def is_structured(self) -> bool:
        return self.weekday is not None


def parse_day_record(rest: str) -> DayRecord:
    """Parse the text after "YYYY/MM/DD:" into a `DayRecord`."""
    m = _DAY_BODY_RE.match(rest)
    if not m:
        return DayRecord(raw=rest)
    aparahna = m.group(5)
    return DayRecord(
        raw=rest,
        weekday=m.group(1).strip(),
        vasaram=m.group(2).strip(),
        sunrise=m.group(3).strip(),
        sunset=m.group(4).strip(),
        # Kept as written; it may be a time range or arbitrary text
        aparahna=aparahna.strip() if aparahna else None,
    )


def parse_day_records(section_lines: Sequence[str]) -> Dict[str, DayRecord]:
    """Parse "Vaasaram details" lines into records keyed by "YYYY/MM/DD".

    Expected line shapes:

      2025/12/22: Monday, Indu, Sunrise: 07:49:00, Sunset: 16:31:00
      2026/01/06: Tuesday, Bhowma, Sunrise: 07:50:43, Sunset: 16:42:54, Aparaanha kaalam: 13:00:00 to 15:00:00

    Lines without a date prefix are skipped; dated lines of any other shape
    keep their raw text. A later line for the same date replaces an earlier one.
    """
    records: Dict[str, DayRecord] = {}
    for raw in section_lines:
        line = (raw or "").replace("\u00a0", " ").strip()
        if not line or line.startswith("="):
            continue
        m = _DAY_LINE_RE.match(line)
        if not m:
            continue
        records[m.group(1)] = parse_day_record(m.group(2).strip())
    return records
