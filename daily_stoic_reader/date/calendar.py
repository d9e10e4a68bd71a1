from __future__ import annotations

from datetime import date, timedelta

from .types import LAST_LABEL, REFERENCE_YEAR, DateLabel


def today_as_label(today: date | None = None) -> DateLabel:
    """Label for the current local date, keeping month and day only."""
    d = today or date.today()
    return DateLabel(month=d.month, day=d.day)


def successor(label: DateLabel) -> DateLabel:
    """Label for the following day; December 31 wraps to January 1."""
    nxt = label.to_date() + timedelta(days=1)
    if nxt.year != REFERENCE_YEAR:
        nxt = nxt.replace(year=REFERENCE_YEAR)
    return DateLabel.from_date(nxt)


def next_boundary(label: DateLabel, cycle_end: DateLabel = LAST_LABEL) -> DateLabel | None:
    """Label whose header ends `label`'s entry, or None for the last entry of the book.

    The last entry has no following header, so the caller reads to the end of
    the document instead of wrapping around to January 1.
    """
    if label == cycle_end:
        return None
    return successor(label)
