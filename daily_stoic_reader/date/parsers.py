from __future__ import annotations

import re

from ..errors import InvalidDate
from .types import MONTH_NAMES, DateLabel

MONTHS = {name.lower(): i for i, name in enumerate(MONTH_NAMES, start=1)}

# "March 3", "mar 3", "March 3," ... no year.
LABEL_RE = re.compile(r"^(?P<month>[a-zA-Z]{3,12})\.?\s+(?P<day>\d{1,2})\s*[,.]?$")


def _month_token_to_int(tok: str) -> int | None:
    tok = tok.strip().lower()
    if tok in MONTHS:
        return MONTHS[tok]
    if len(tok) < 3:
        return None
    hits = [num for name, num in MONTHS.items() if name.startswith(tok)]
    if len(hits) == 1:
        return hits[0]
    return None


def parse_label(text: str) -> DateLabel:
    """Parse a "Month Day" label (no year) into a DateLabel.

    Month names are case-insensitive and may be abbreviated ("Sep 9").
    Validation runs against the reference leap year, so "February 29" parses.
    """

    raw = (text or "").strip()
    m = LABEL_RE.match(raw)
    if not m:
        raise InvalidDate(f'Invalid date "{text}" (expected "Month Day", e.g. "March 3")')

    month = _month_token_to_int(m.group("month"))
    if month is None:
        raise InvalidDate(f'Invalid date "{text}": unknown month "{m.group("month")}"')

    try:
        return DateLabel(month=month, day=int(m.group("day")))
    except InvalidDate as exc:
        raise InvalidDate(f'Invalid date "{text}": no such day in a leap year') from exc
