from __future__ import annotations

from abc import ABC, abstractmethod


class Corrector(ABC):
    name: str

    @abstractmethod
    def correct(self, text: str) -> str:
        """Return the repaired text. Raise CorrectionFailed on any service error."""
        raise NotImplementedError


class NoopCorrector(Corrector):
    """Returns text unchanged (skip repair)."""

    name = "none"

    def correct(self, text: str) -> str:
        return text
