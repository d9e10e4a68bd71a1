from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from ..config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, AppConfig
from ..errors import ConfigError, CorrectionFailed
from ..logging import get_logger
from .base import Corrector

logger = get_logger(__name__)

INSTRUCTIONS = (
    "Fix the text based on the following instructions:\n"
    "- Keep the quote as close to its original as possible.\n"
    "- Some words may be missing characters, combined together, or have a space in the middle of a word. "
    "Correct these.\n"
    "- Merge any line breaks that occur in the middle of a sentence.\n"
    "- Preserve paragraph breaks (indicated by empty lines or where appropriate).\n"
    "- Add an extra line break between paragraphs to improve readability.\n"
    "- Fix any missing characters or spacing issues in words.\n"
    "- Do not wrap the quote in quotation marks unless the text already has them.\n"
    "- If the text ends with a few lines in all caps that seem out of context, remove them.\n"
    "- Do not add any commentary or explanation, just output the corrected text.\n"
)


def build_prompt(text: str) -> str:
    return f"{INSTRUCTIONS}Text:\n{text}"


def extract_content(payload: Any) -> str:
    """Pull the corrected text out of a chat-completions response body."""
    if not isinstance(payload, dict):
        raise CorrectionFailed(f"Unexpected correction response: {payload!r}")

    error = payload.get("error")
    if error is not None:
        message = error.get("message") if isinstance(error, dict) else None
        if message:
            raise CorrectionFailed(f"Correction request resulted in an error: {message}")
        raise CorrectionFailed("Correction request resulted in an error and no message was found")

    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None
    if not isinstance(content, str):
        raise CorrectionFailed("Failed to extract content from correction response")
    return content


@dataclass
class ChatCompletionsCorrector(Corrector):
    """OpenAI-compatible chat-completions endpoint (OpenRouter, OpenAI, ...)."""

    endpoint: str
    api_key: str
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout_s: float = 60

    name: str = "llm"

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "ChatCompletionsCorrector":
        if not cfg.llm_endpoint or not cfg.llm_api_key:
            raise ConfigError("Missing LLM_ENDPOINT/LLM_API_KEY (set env vars or create .env; see .env.example)")
        return cls(
            endpoint=cfg.llm_endpoint,
            api_key=cfg.llm_api_key,
            model=cfg.llm_model,
            max_tokens=cfg.llm_max_tokens,
            timeout_s=cfg.llm_timeout_s,
        )

    def correct(self, text: str) -> str:
        body = {
            "model": self.model,
            "messages": [{"role": "user", "content": build_prompt(text)}],
            "max_tokens": self.max_tokens,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        logger.debug("correction_request", model=self.model, chars=len(text))
        try:
            r = requests.post(self.endpoint, headers=headers, json=body, timeout=self.timeout_s)
        except requests.RequestException as exc:
            raise CorrectionFailed(f"Correction request failed: {exc}") from exc

        try:
            payload = r.json()
        except ValueError as exc:
            raise CorrectionFailed(
                f"Failed to parse correction response JSON ({r.status_code}): {r.text[:200]}"
            ) from exc

        out = extract_content(payload)
        logger.debug("correction_done", model=self.model, chars=len(out))
        return out
