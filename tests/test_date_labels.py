from __future__ import annotations

from datetime import date

import pytest

from daily_stoic_reader.date import DateLabel, next_boundary, parse_label, successor, today_as_label
from daily_stoic_reader.errors import InvalidDate


def test_parse_label_canonical_rendering() -> None:
    assert str(parse_label("March 3")) == "March 3"
    assert str(parse_label("  march 03 ")) == "March 3"
    assert str(parse_label("Sep 9")) == "September 9"
    assert parse_label("December 31,") == DateLabel(12, 31)


def test_parse_label_accepts_leap_day() -> None:
    assert parse_label("February 29") == DateLabel(2, 29)


@pytest.mark.parametrize("raw", ["February 30", "April 31", "Smarch 3", "Ju 4", "March", "3 March", "", "March 3 2024"])
def test_parse_label_rejects_invalid(raw: str) -> None:
    with pytest.raises(InvalidDate):
        parse_label(raw)


def test_invalid_date_is_value_error() -> None:
    with pytest.raises(ValueError):
        DateLabel(13, 1)


def test_successor_across_leap_day() -> None:
    assert str(successor(parse_label("February 28"))) == "February 29"
    assert str(successor(parse_label("February 29"))) == "March 1"
    assert str(successor(parse_label("April 30"))) == "May 1"


def test_successor_wraps_year_end() -> None:
    assert successor(DateLabel(12, 31)) == DateLabel(1, 1)


def test_successor_round_trips_through_text_for_every_day() -> None:
    label = DateLabel(1, 1)
    seen = 0
    while True:
        nxt = successor(label)
        assert parse_label(str(nxt)) == nxt
        seen += 1
        label = nxt
        if label == DateLabel(1, 1):
            break
    assert seen == 366


def test_next_boundary_last_day_has_none() -> None:
    assert next_boundary(DateLabel(12, 31)) is None
    assert next_boundary(DateLabel(12, 30)) == DateLabel(12, 31)
    assert next_boundary(DateLabel(6, 30), cycle_end=DateLabel(6, 30)) is None


def test_today_as_label_keeps_month_and_day() -> None:
    assert today_as_label(date(2023, 3, 3)) == DateLabel(3, 3)
    assert today_as_label(date(2024, 2, 29)) == DateLabel(2, 29)


def test_labels_order_by_day_of_year() -> None:
    assert DateLabel(1, 31) < DateLabel(2, 1) < DateLabel(12, 31)
