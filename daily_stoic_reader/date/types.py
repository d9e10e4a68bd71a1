from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..errors import InvalidDate

# Leap year, so February 29 is a valid label.
REFERENCE_YEAR = 2000

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True, order=True)
class DateLabel:
    """A day of the year with no year component, e.g. "March 3".

    Always valid in REFERENCE_YEAR. Ordering follows the reference year's
    day sequence (month, then day).
    """

    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            date(REFERENCE_YEAR, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise InvalidDate(f"Not a valid day of the year: month={self.month!r} day={self.day!r}") from exc

    @classmethod
    def from_date(cls, d: date) -> "DateLabel":
        return cls(month=d.month, day=d.day)

    def to_date(self) -> date:
        return date(REFERENCE_YEAR, self.month, self.day)

    @property
    def text(self) -> str:
        # Same rendering as the document headers: full month name, unpadded day.
        return f"{MONTH_NAMES[self.month - 1]} {self.day}"

    def __str__(self) -> str:
        return self.text


LAST_LABEL = DateLabel(12, 31)
