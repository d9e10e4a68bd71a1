"""Print one day's entry from the daily-reflection book.

Example:
  daily-stoic "March 3"
  daily-stoic --document saved_page.txt --corrector none
"""

from __future__ import annotations

import argparse
import json
import sys

from .config import load_config
from .correct.registry import build_corrector
from .date import parse_label, today_as_label
from .errors import DailyStoicError
from .logging import configure_logging
from .pipeline import run
from .segmenter import DailyRecord


def format_record(record: DailyRecord) -> str:
    return (
        f"Date:\n{record.date}\n\n"
        f"Title:\n{record.title}\n\n"
        f"Quote:\n{record.quote}\n\n"
        f"Quoter:\n{record.attribution}\n\n"
        f"Explanation:\n{record.explanation}"
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="daily-stoic", description="Print one day's entry, cleaned up.")
    ap.add_argument("date", nargs="?", help='Day to show, e.g. "March 3" (default: today)')
    ap.add_argument("--document", help="URL or local path of the book text (default: $DAILY_STOIC_URL)")
    ap.add_argument("--corrector", default="llm", help="llm | rules | none (default: llm)")
    ap.add_argument("--corrections-map", help="JSON correction map for --corrector rules")
    ap.add_argument("--sequential", action="store_true", help="Correct quote and explanation one after another")
    ap.add_argument("--json", action="store_true", help="Print the record as JSON")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging({0: "WARNING", 1: "INFO"}.get(args.verbose, "DEBUG"))

    try:
        cfg = load_config()
        if not args.verbose:
            configure_logging(cfg.log_level)

        label = parse_label(args.date) if args.date else today_as_label()
        corrector = build_corrector(args.corrector, cfg, corrections_path=args.corrections_map)
        record = run(cfg, label, corrector, document=args.document, concurrent=not args.sequential)
    except (DailyStoicError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(record.as_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_record(record))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
