from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, replace

from .errors import MalformedRecord
from .locator import RawBlock

# Em dash; the line crediting the quote's author starts with it.
ATTRIBUTION_MARKER = "—"

QUOTE_START = 2


@dataclass(frozen=True)
class DailyRecord:
    date: str
    title: str
    quote: str
    attribution: str
    explanation: str

    def with_corrections(self, *, quote: str, explanation: str) -> "DailyRecord":
        return replace(self, quote=quote, explanation=explanation)

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def _join(lines: Sequence[str]) -> str:
    # Line breaks inside the quote/explanation are layout wrapping only.
    return " ".join(lines).strip()


def segment_record(block: RawBlock | str | Sequence[str]) -> DailyRecord:
    """Split one entry into date, title, quote, attribution and explanation.

    Layout: line 0 is the date header, line 1 the title, then the quote up to
    the first line starting with an em dash (the attribution), then the
    explanation until the end of the block.
    """

    if isinstance(block, RawBlock):
        lines = list(block.lines)
    elif isinstance(block, str):
        lines = block.splitlines()
    else:
        lines = list(block)

    if len(lines) < 2:
        raise MalformedRecord(f"Entry has {len(lines)} line(s); expected a date line and a title line")

    pivot = next(
        (i for i in range(QUOTE_START, len(lines)) if lines[i].startswith(ATTRIBUTION_MARKER)),
        None,
    )
    if pivot is None:
        raise MalformedRecord(
            f'Entry "{lines[0].strip()}" has no line starting with "{ATTRIBUTION_MARKER}" to end the quote'
        )

    return DailyRecord(
        date=lines[0].strip(),
        title=lines[1].strip(),
        quote=_join(lines[QUOTE_START:pivot]),
        attribution=lines[pivot].strip(),
        explanation=_join(lines[pivot + 1 :]),
    )
