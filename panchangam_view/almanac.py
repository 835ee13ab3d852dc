"""Turn panchangam report text into display strings.

`parse_panchangam` is independent of the clock: parsing the same text twice
gives equal results. `render_fields` applies a local `now` to pick today's
day record and the current/next period of each category, and returns plain
strings keyed by the field names the web page binds to.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from .formatting import compute_noon, format_date_time, format_date_ymd, format_hms, format_time_remaining
from .intervals import Interval, find_current_and_next, get_intervals_from_section
from .names import format_nakshatra_display
from .parser import DayRecord, extract_section, get_backend_timestamp, get_header_value, parse_day_records, split_lines

PLACEHOLDER = "–"
NOT_IN_RANGE = "Not in range"
NOT_AVAILABLE = "Not available"

HEADER_LABELS = ("Samvatsaram", "Ayanam", "Ruthu", "Masam", "Paksham")
DAY_SECTION_LABELS = ("Vaasaram details", "Vasaram details")  # alternate spelling second


@dataclass(frozen=True)
class HeaderFields:
    """Calendar header values; None when the label is absent."""

    samvatsaram: Optional[str] = None
    ayanam: Optional[str] = None
    ruthu: Optional[str] = None
    masam: Optional[str] = None
    paksham: Optional[str] = None
    backend_timestamp: Optional[str] = None


@dataclass(frozen=True)
class Panchangam:
    """Everything parsed from one report."""

    header: HeaderFields
    tithi: Tuple[Interval, ...]
    nakshatra: Tuple[Interval, ...]
    yoga: Tuple[Interval, ...]
    karana: Tuple[Interval, ...]
    days: Mapping[str, DayRecord]


@dataclass(frozen=True)
class _Category:
    key: str  # field-name prefix
    attr: str  # Panchangam attribute
    label: str  # section header in the report
    display: Callable[[str], str]


def _plain(name: str) -> str:
    return name


CATEGORIES = (
    _Category("tithi", "tithi", "Thithi details", _plain),
    _Category("nak", "nakshatra", "Nakshatram details", format_nakshatra_display),
    _Category("yoga", "yoga", "Yogam details", _plain),
    _Category("karana", "karana", "Karanam details", _plain),
)


def parse_panchangam(text: str) -> Panchangam:
    """Parse report text into headers, interval sequences and day records."""
    lines = split_lines(text)

    header = HeaderFields(
        *(get_header_value(lines, label) for label in HEADER_LABELS),
        backend_timestamp=get_backend_timestamp(lines),
    )
    intervals = {
        c.attr: tuple(get_intervals_from_section(extract_section(lines, c.label)))
        for c in CATEGORIES
    }

    day_section = []
    for label in DAY_SECTION_LABELS:
        day_section = extract_section(lines, label)
        if day_section:
            break

    return Panchangam(
        header=header,
        days=MappingProxyType(parse_day_records(day_section)),
        **intervals,
    )


def _render_day(day: Optional[DayRecord], now: datetime) -> Dict[str, str]:
    if day is None:
        return {
            "vasaram-today": NOT_AVAILABLE,
            "sunrise-time": PLACEHOLDER,
            "sunset-time": PLACEHOLDER,
            "noon-time": PLACEHOLDER,
            "aparahna-time": PLACEHOLDER,
        }

    fields = {
        "vasaram-today": (
            f"{day.weekday}, {day.vasaram}" if day.weekday and day.vasaram
            else day.raw or NOT_AVAILABLE
        ),
        "aparahna-time": day.aparahna or PLACEHOLDER,
        "sunrise-time": PLACEHOLDER,
        "sunset-time": PLACEHOLDER,
        "noon-time": PLACEHOLDER,
    }
    if day.sunrise and day.sunset:
        fields["sunrise-time"] = day.sunrise
        fields["sunset-time"] = day.sunset
        noon = compute_noon(now.date(), day.sunrise, day.sunset)
        if noon is not None:
            fields["noon-time"] = format_hms(noon)
    return fields


def render_fields(panchangam: Panchangam, now: datetime) -> Dict[str, str]:
    """Render display strings for `now` (a naive local datetime)."""
    header = panchangam.header
    fields: Dict[str, str] = {
        label.lower(): getattr(header, label.lower()) or PLACEHOLDER
        for label in HEADER_LABELS
    }
    fields["backend-time"] = (
        f"(Panchangam back-end time stamp: {header.backend_timestamp})"
        if header.backend_timestamp else ""
    )
    fields["now-display"] = f"Current time (local): {format_date_ymd(now)} {format_hms(now)}"

    fields.update(_render_day(panchangam.days.get(format_date_ymd(now)), now))

    for c in CATEGORIES:
        current, nxt = find_current_and_next(getattr(panchangam, c.attr), now)
        fields[f"{c.key}-current"] = c.display(current.name) if current else NOT_IN_RANGE
        fields[f"{c.key}-remaining"] = format_time_remaining(current.end, now) if current else ""
        fields[f"{c.key}-next"] = (
            f"{c.display(nxt.name)} (starts: {format_date_time(nxt.start)})" if nxt else PLACEHOLDER
        )
    return fields


def build_display(text: str, now: datetime) -> Dict[str, str]:
    """Parse `text` and render it for `now` in one call."""
    return render_fields(parse_panchangam(text), now)
