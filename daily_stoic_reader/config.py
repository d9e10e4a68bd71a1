"""Configuration loaded once at startup from the environment (and .env)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .date import LAST_LABEL, DateLabel, parse_label
from .errors import ConfigError, InvalidDate

DEFAULT_MODEL = "openai/gpt-4o"
DEFAULT_MAX_TOKENS = 500


def _get_env(env: Mapping[str, str], *keys: str, default: str | None = None) -> str | None:
    # First non-blank value wins; later keys are legacy spellings.
    for key in keys:
        value = env.get(key)
        if value is not None and value.strip():
            return value.strip()
    return default


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    value = _get_env(env, key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Environment variable {key} must be an integer, got {value!r}") from exc


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    value = _get_env(env, key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"Environment variable {key} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class AppConfig:
    document_url: str | None = None
    llm_endpoint: str | None = None
    llm_api_key: str | None = None
    llm_model: str = DEFAULT_MODEL
    llm_max_tokens: int = DEFAULT_MAX_TOKENS
    llm_timeout_s: float = 60.0
    http_timeout_s: float = 30.0
    cycle_end: DateLabel = LAST_LABEL
    log_level: str = "WARNING"

    def require_document_url(self) -> str:
        if not self.document_url:
            raise ConfigError("Missing DAILY_STOIC_URL (set env var, create .env, or pass --document)")
        return self.document_url


def load_config(env: Mapping[str, str] | None = None) -> AppConfig:
    """Build the AppConfig.

    With env=None, reads .env from the working directory (or a parent), if
    present, into the process environment first.
    Nothing is required here; consumers validate the fields they need.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    cycle_end_raw = _get_env(env, "CYCLE_END")
    try:
        cycle_end = parse_label(cycle_end_raw) if cycle_end_raw else LAST_LABEL
    except InvalidDate as exc:
        raise ConfigError(f"CYCLE_END must be a \"Month Day\" label, got {cycle_end_raw!r}") from exc

    max_tokens = _get_int(env, "LLM_MAX_TOKENS", DEFAULT_MAX_TOKENS)
    if max_tokens <= 0:
        raise ConfigError("LLM_MAX_TOKENS must be positive")

    return AppConfig(
        document_url=_get_env(env, "DAILY_STOIC_URL", "daily_stoic_url"),
        llm_endpoint=_get_env(env, "LLM_ENDPOINT", "endpoint"),
        llm_api_key=_get_env(env, "LLM_API_KEY", "api_key"),
        llm_model=_get_env(env, "LLM_MODEL", default=DEFAULT_MODEL) or DEFAULT_MODEL,
        llm_max_tokens=max_tokens,
        llm_timeout_s=_get_float(env, "LLM_TIMEOUT_SECONDS", 60.0),
        http_timeout_s=_get_float(env, "HTTP_TIMEOUT_SECONDS", 30.0),
        cycle_end=cycle_end,
        log_level=(_get_env(env, "LOG_LEVEL", default="WARNING") or "WARNING").upper(),
    )
