"""Tests for atomic report writers."""

from __future__ import annotations

import json
from pathlib import Path

from chartgate.io import write_json_atomic, write_text_atomic


def test_write_json_atomic_writes_sorted_payload(tmp_path: Path) -> None:
    target = tmp_path / "reports" / "report.json"

    write_json_atomic(path=target, payload={"b": 1, "a": [True, None]}, temp_prefix=".tmp-", temp_suffix=".json")

    text = target.read_text(encoding="utf-8")
    assert json.loads(text) == {"a": [True, None], "b": 1}
    assert text.index('"a"') < text.index('"b"')
    assert text.endswith("\n")


def test_write_text_atomic_replaces_existing_file_without_leftovers(tmp_path: Path) -> None:
    target = tmp_path / "report.txt"
    target.write_text("old", encoding="utf-8")

    write_text_atomic(path=target, content="new", temp_prefix=".tmp-", temp_suffix=".txt")

    assert target.read_text(encoding="utf-8") == "new"
    assert [p.name for p in tmp_path.iterdir()] == ["report.txt"]
