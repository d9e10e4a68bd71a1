"""Day-of-year labels ("March 3") anchored to a fixed leap year.

The book repeats every year, so entries are keyed by month and day only.
"""

from .types import LAST_LABEL, REFERENCE_YEAR, DateLabel
from .parsers import parse_label
from .calendar import next_boundary, successor, today_as_label
