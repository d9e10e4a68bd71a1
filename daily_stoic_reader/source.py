from __future__ import annotations

from pathlib import Path

import requests

from .errors import TransportError
from .logging import get_logger

logger = get_logger(__name__)


def fetch_document(url: str, *, timeout_s: float = 30) -> str:
    """GET the page body as text."""
    logger.info("fetch_document", url=url)
    try:
        r = requests.get(url, timeout=timeout_s)
    except requests.RequestException as exc:
        raise TransportError(f"Request failed for {url}: {exc}") from exc

    if not 200 <= r.status_code < 300:
        raise TransportError(f"Fetching {url} failed ({r.status_code}): {r.reason}")

    text = r.text
    logger.debug("fetch_document_done", url=url, chars=len(text))
    return text


def load_document(source: str, *, timeout_s: float = 30) -> str:
    """Return the document body from an http(s) URL or a local file path."""
    if source.lower().startswith(("http://", "https://")):
        return fetch_document(source, timeout_s=timeout_s)

    p = Path(source).expanduser()
    if not p.is_file():
        raise TransportError(f"Document not found: {p}")
    logger.info("read_document", path=str(p))
    try:
        return p.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise TransportError(f"Failed to read {p}: {exc}") from exc
