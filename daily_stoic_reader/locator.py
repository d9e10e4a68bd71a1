from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .date import DateLabel
from .errors import RecordNotFound
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RawBlock:
    """Lines [start, end) of the document: one day's entry, header line included."""

    lines: tuple[str, ...]
    start: int
    end: int

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _as_lines(document: str | Sequence[str]) -> list[str]:
    if isinstance(document, str):
        return document.splitlines()
    return list(document)


def locate_record(
    document: str | Sequence[str],
    label: DateLabel | str,
    next_label: DateLabel | str | None,
) -> RawBlock:
    """Find the block of lines belonging to `label`.

    Entries carry no delimiter other than the next entry's header, so the block
    runs from the first line starting with `label` up to (excluding) the first
    later line starting with `next_label`. Header lines often have trailing
    text, hence prefix matching.

    next_label=None means `label` is the last entry: read to the end of the
    document. A next_label that never appears is an error.
    """

    lines = _as_lines(document)
    date_text = str(label)

    start = next((i for i, ln in enumerate(lines) if ln.startswith(date_text)), None)
    if start is None:
        raise RecordNotFound(f'No line starting with "{date_text}" in document ({len(lines)} lines)')

    if next_label is None:
        end = len(lines)
    else:
        next_text = str(next_label)
        end = next(
            (i for i in range(start + 1, len(lines)) if lines[i].startswith(next_text)),
            None,
        )
        if end is None:
            raise RecordNotFound(
                f'Found "{date_text}" at line {start + 1} but no following line starting with "{next_text}"'
            )

    logger.debug("record_located", date=date_text, start=start, end=end)
    return RawBlock(lines=tuple(lines[start:end]), start=start, end=end)
