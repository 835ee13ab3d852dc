from datetime import datetime

from panchangam_view.intervals import (
    Interval,
    find_current_and_next,
    get_intervals_from_section,
    parse_interval_line,
)


def test_parse_interval_line():
    iv = parse_interval_line("  Prathama: 2025/12/04 15:14 to 2025/12/05 11:26 ")
    assert iv == Interval("Prathama", datetime(2025, 12, 4, 15, 14), datetime(2025, 12, 5, 11, 26))
    assert iv.start < iv.end


def test_parse_interval_line_name_stops_at_first_colon():
    iv = parse_interval_line("Krishna Ekadashi : 2025/12/14 18:50 to 2025/12/15 21:20")
    assert iv.name == "Krishna Ekadashi"


def test_parse_interval_line_rejects_malformed():
    assert parse_interval_line("Prathama: 2025/12/04 15:14 to 2025/12/05 11:26 extra") is None
    assert parse_interval_line("Prathama: 2025-12-04 15:14 to 2025-12-05 11:26") is None
    assert parse_interval_line("Prathama: 2025/12/4 15:14 to 2025/12/05 11:26") is None
    assert parse_interval_line("Prathama 2025/12/04 15:14 to 2025/12/05 11:26") is None
    assert parse_interval_line("") is None


def test_parse_interval_line_out_of_range_components():
    assert parse_interval_line("Prathama: 2025/13/04 15:14 to 2025/12/05 11:26") is None
    assert parse_interval_line("Prathama: 2025/12/04 24:14 to 2025/12/05 11:26") is None


def test_parse_interval_line_does_not_validate_order():
    iv = parse_interval_line("Odd: 2025/12/05 11:26 to 2025/12/04 15:14")
    assert iv is not None and iv.start > iv.end


def test_get_intervals_skips_next_and_blank_lines():
    lines = [
        "Prathama: 2025/12/04 15:14 to 2025/12/05 11:26",
        "",
        "Next Tithi: 2025/12/05 11:26 to 2025/12/06 07:50",
        "garbage",
        "Dwitiya: 2025/12/05 11:26 to 2025/12/06 07:50",
    ]
    assert [iv.name for iv in get_intervals_from_section(lines)] == ["Prathama", "Dwitiya"]


def _seq():
    return [
        Interval("A", datetime(2025, 1, 1, 10), datetime(2025, 1, 1, 11)),
        Interval("B", datetime(2025, 1, 1, 11), datetime(2025, 1, 1, 12)),
    ]


def test_resolver_is_half_open():
    seq = _seq()
    assert find_current_and_next(seq, datetime(2025, 1, 1, 10)) == (seq[0], seq[1])
    assert find_current_and_next(seq, datetime(2025, 1, 1, 11)) == (seq[1], None)
    assert find_current_and_next(seq, datetime(2025, 1, 1, 12)) == (None, None)


def test_resolver_no_match_before_first():
    res = find_current_and_next(_seq(), datetime(2025, 1, 1, 9, 59))
    assert res.current is None and res.next is None


def test_resolver_next_is_positional():
    late = Interval("Late", datetime(2025, 1, 2), datetime(2025, 1, 3))
    early = Interval("Early", datetime(2024, 1, 1), datetime(2024, 1, 2))
    overlap = Interval("Overlap", datetime(2025, 1, 2, 12), datetime(2025, 1, 4))
    res = find_current_and_next([late, early, overlap], datetime(2025, 1, 2, 13))
    assert res.current is late
    assert res.next is early


def test_resolver_empty():
    assert find_current_and_next([], datetime(2025, 1, 1)) == (None, None)
