from __future__ import annotations

from pathlib import Path

import pytest
import requests

from daily_stoic_reader import source
from daily_stoic_reader.errors import TransportError


class FakeResponse:
    def __init__(self, status_code: int, text: str = "", reason: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.reason = reason


def test_load_document_reads_local_file(tmp_path: Path) -> None:
    p = tmp_path / "book.txt"
    p.write_text("March 3\nTitle\n", encoding="utf-8")
    assert source.load_document(str(p)) == "March 3\nTitle\n"


def test_load_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(TransportError, match="not found"):
        source.load_document(str(tmp_path / "missing.txt"))


def test_fetch_document_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_get(url, timeout=None):
        seen.update(url=url, timeout=timeout)
        return FakeResponse(200, "body")

    monkeypatch.setattr(source.requests, "get", fake_get)
    assert source.load_document("https://book.test/page", timeout_s=5) == "body"
    assert seen == {"url": "https://book.test/page", "timeout": 5}


def test_fetch_document_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(source.requests, "get", lambda url, timeout=None: FakeResponse(404, reason="Not Found"))
    with pytest.raises(TransportError, match="404"):
        source.fetch_document("https://book.test/page")


def test_fetch_document_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(url, timeout=None):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(source.requests, "get", boom)
    with pytest.raises(TransportError, match="dns failure"):
        source.fetch_document("https://book.test/page")
