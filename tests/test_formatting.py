from datetime import date, datetime, timedelta

import pytest

from panchangam_view.formatting import (
    compute_noon,
    format_date_time,
    format_date_ymd,
    format_hms,
    format_time_remaining,
    parse_hms,
)
from panchangam_view.names import NAKSHATRA_NAMES, format_nakshatra_display

NOW = datetime(2025, 12, 5, 10, 0)


def test_date_and_time_formats_are_zero_padded():
    dt = datetime(2025, 1, 6, 7, 5, 9)
    assert format_date_time(dt) == "2025/01/06 07:05"
    assert format_date_ymd(dt) == "2025/01/06"
    assert format_hms(dt) == "07:05:09"


def test_remaining_hours_and_minutes():
    assert format_time_remaining(NOW + timedelta(minutes=90), NOW) == "1 hours 30 minutes remaining"


def test_remaining_minutes_only_and_hours_only():
    assert format_time_remaining(NOW + timedelta(minutes=45, seconds=59), NOW) == "45 minutes remaining"
    assert format_time_remaining(NOW + timedelta(hours=2, seconds=30), NOW) == "2 hours remaining"


def test_remaining_under_a_minute():
    assert format_time_remaining(NOW + timedelta(seconds=59), NOW) == "Ending now"


def test_remaining_ended():
    assert format_time_remaining(NOW, NOW) == "Ended just now"
    assert format_time_remaining(NOW - timedelta(hours=1), NOW) == "Ended just now"


def test_parse_hms():
    assert parse_hms("07:49:00") == (7, 49, 0)
    assert parse_hms(" 16:31:05 ") == (16, 31, 5)
    assert parse_hms("7:49:00") is None
    assert parse_hms("07:49") is None


def test_noon_is_midpoint_floored_to_milliseconds():
    noon = compute_noon(date(2025, 12, 22), "07:49:00", "16:31:01")
    assert noon == datetime(2025, 12, 22, 12, 10, 0, 500000)
    assert format_hms(noon) == "12:10:00"


def test_noon_unavailable_on_bad_times():
    assert compute_noon(date(2025, 12, 22), "07:49", "16:31:00") is None
    assert compute_noon(date(2025, 12, 22), "07:49:00", "25:00:00") is None


def test_nakshatra_display_known_and_unknown():
    assert format_nakshatra_display("Aardra") == "Aardra / आर्द्रा / ఆరుద్ర / திருவாதிரை"
    assert format_nakshatra_display("  Aardra ") == "Aardra / आर्द्रा / ఆరుద్ర / திருவாதிரை"
    assert format_nakshatra_display("Unknown") == "Unknown"
    assert format_nakshatra_display(" Unknown ") == "Unknown"


def test_nakshatra_table_is_read_only():
    assert len(NAKSHATRA_NAMES) == 27
    with pytest.raises(TypeError):
        NAKSHATRA_NAMES["New"] = ("a", "b", "c")
    assert "New" not in NAKSHATRA_NAMES
