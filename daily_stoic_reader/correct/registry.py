from __future__ import annotations

from pathlib import Path

from ..config import AppConfig
from .base import Corrector, NoopCorrector
from .chat import ChatCompletionsCorrector
from .rules import RuleCorrector


def build_corrector(name: str, cfg: AppConfig, **kwargs) -> Corrector:
    """Corrector factory.

    New services get added here.
    """
    n = (name or "llm").lower()
    if n in ("llm", "chat", "openai"):
        return ChatCompletionsCorrector.from_config(cfg)
    if n == "rules":
        path = kwargs.get("corrections_path")
        return RuleCorrector(corrections_path=Path(path) if path else None)
    if n in ("none", "noop", "off"):
        return NoopCorrector()

    raise ValueError(f"Unsupported corrector: {name} (choose llm, rules or none)")
