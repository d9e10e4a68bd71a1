from __future__ import annotations

import json
from pathlib import Path

import pytest

from daily_stoic_reader.cli import main

BOOK = """THE DAILY STOIC
February 29
LEAP DAY
An extra day
is still a day.
—SENECA
Use it well.
March 1
NEXT
"""


@pytest.fixture
def book(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    p = tmp_path / "book.txt"
    p.write_text(BOOK, encoding="utf-8")
    return p


def test_cli_prints_fields_in_order(book: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["February 29", "--document", str(book), "--corrector", "none"])
    out = capsys.readouterr().out

    assert rc == 0
    assert out.endswith(
        "Date:\nFebruary 29\n\n"
        "Title:\nLEAP DAY\n\n"
        "Quote:\nAn extra day is still a day.\n\n"
        "Quoter:\n—SENECA\n\n"
        "Explanation:\nUse it well.\n"
    )


def test_cli_json_output(book: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["feb 29", "--document", str(book), "--corrector", "none", "--json", "--sequential"])
    out = capsys.readouterr().out
    assert rc == 0
    data = json.loads(out[out.index("{") :])
    assert data["attribution"] == "—SENECA"
    assert data["explanation"] == "Use it well."


def test_cli_invalid_date_fails(book: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["February 30", "--document", str(book), "--corrector", "none"])
    captured = capsys.readouterr()
    assert rc == 1
    assert "February 30" in captured.err
    assert "Date:" not in captured.out


def test_cli_missing_entry_fails(book: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["March 1", "--document", str(book), "--corrector", "none"])
    captured = capsys.readouterr()
    assert rc == 1
    assert "March 2" in captured.err
    assert "Date:" not in captured.out
