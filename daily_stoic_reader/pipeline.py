from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .config import AppConfig
from .correct.base import Corrector
from .date import LAST_LABEL, DateLabel, next_boundary
from .errors import CorrectionFailed
from .locator import locate_record
from .logging import get_logger
from .segmenter import DailyRecord, segment_record
from .source import load_document

logger = get_logger(__name__)

CORRECTED_FIELDS = ("quote", "explanation")


def extract_record(
    document: str | Sequence[str],
    label: DateLabel,
    *,
    cycle_end: DateLabel = LAST_LABEL,
) -> DailyRecord:
    """Locate and segment the entry for `label` (no correction)."""
    block = locate_record(document, label, next_boundary(label, cycle_end))
    return segment_record(block)


def _correct_field(corrector: Corrector, field: str, text: str) -> str:
    try:
        out = corrector.correct(text)
    except CorrectionFailed as exc:
        raise CorrectionFailed(f"Correcting {field} failed: {exc}") from exc
    logger.info("correction_done", field=field, corrector=corrector.name)
    return out


def correct_record(record: DailyRecord, corrector: Corrector, *, concurrent: bool = True) -> DailyRecord:
    """Repair quote and explanation; return the corrected copy.

    Both calls always run to completion. If either fails, no record is
    returned: a single failure is re-raised, two failures are reported together.
    """

    texts = {f: getattr(record, f) for f in CORRECTED_FIELDS}
    results: dict[str, str] = {}
    errors: dict[str, CorrectionFailed] = {}

    if concurrent:
        with ThreadPoolExecutor(max_workers=len(texts)) as pool:
            futures = {f: pool.submit(_correct_field, corrector, f, t) for f, t in texts.items()}
        # Leaving the with-block joins both calls.
        for f, fut in futures.items():
            exc = fut.exception()
            if exc is None:
                results[f] = fut.result()
            elif isinstance(exc, CorrectionFailed):
                errors[f] = exc
            else:
                raise exc
    else:
        for f, t in texts.items():
            try:
                results[f] = _correct_field(corrector, f, t)
            except CorrectionFailed as exc:
                errors[f] = exc

    if len(errors) == 1:
        raise next(iter(errors.values()))
    if errors:
        first = next(iter(errors.values()))
        msg = "; ".join(str(e) for e in errors.values())
        raise CorrectionFailed(msg) from first

    return record.with_corrections(quote=results["quote"], explanation=results["explanation"])


def run(
    cfg: AppConfig,
    label: DateLabel,
    corrector: Corrector,
    *,
    document: str | None = None,
    concurrent: bool = True,
) -> DailyRecord:
    """Fetch, extract and correct the entry for `label`.

    `document` overrides the configured DAILY_STOIC_URL (URL or local path).
    """
    source = document or cfg.require_document_url()
    body = load_document(source, timeout_s=cfg.http_timeout_s)

    record = extract_record(body, label, cycle_end=cfg.cycle_end)
    logger.info("record_extracted", date=record.date, title=record.title)

    return correct_record(record, corrector, concurrent=concurrent)
