from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from ..errors import CorrectionFailed
from .base import Corrector


def apply_corrections(text: str, corrections_path: Path | None) -> str:
    """Apply an optional correction map.

    Supports:
    1) JSON dict: {"wrong": "right"} (word-boundary, case-insensitive, longest first)
    2) JSON list: [["<regex>", "<replacement>"], ...] (applied in order)

    A missing map leaves the text unchanged.
    """
    out = text

    if not corrections_path or not corrections_path.exists():
        return out

    try:
        obj = json.loads(corrections_path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise CorrectionFailed(f"Corrections map is not valid JSON: {corrections_path}: {exc}") from exc

    # Regex list
    if isinstance(obj, list):
        for item in obj:
            if not (isinstance(item, (list, tuple)) and len(item) == 2):
                continue
            patt, repl = item
            try:
                out = re.sub(str(patt), str(repl), out, flags=re.IGNORECASE)
            except re.error as exc:
                raise CorrectionFailed(f"Bad regex rule {patt!r} in {corrections_path}: {exc}") from exc
        return out

    # Dict mapping
    if isinstance(obj, dict):
        for wrong in sorted(obj.keys(), key=lambda s: len(str(s)), reverse=True):
            wrong_s = str(wrong).strip()
            if not wrong_s:
                continue
            patt = re.compile(rf"\b{re.escape(wrong_s)}\b", flags=re.IGNORECASE)
            # Literal replacement; the map holds plain words, not regex templates.
            right = str(obj[wrong])
            out = patt.sub(lambda _m: right, out)

    return out


@dataclass
class RuleCorrector(Corrector):
    """Offline repair from a local JSON correction map."""

    corrections_path: Path | None = None

    name: str = "rules"

    def correct(self, text: str) -> str:
        return apply_corrections(text, self.corrections_path)
