#!/usr/bin/env python3
"""Show one day's entry; same as the `daily-stoic` console script.

Example:
  python3 scripts/daily_stoic.py "February 29" --corrector none
"""

from __future__ import annotations

from daily_stoic_reader.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
