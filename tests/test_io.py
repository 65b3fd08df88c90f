"""Tests for atomic report persistence."""

from __future__ import annotations

from pathlib import Path

import pytest

from paramguard.io import write_text_atomic


def test_write_text_atomic_creates_parents_and_terminates_line(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "out.json"

    write_text_atomic(target, "{}", prefix=".tmp-", suffix=".json")

    assert target.read_text(encoding="utf-8") == "{}\n"


def test_write_text_atomic_replaces_existing(tmp_path: Path) -> None:
    target = tmp_path / "out.json"
    target.write_text("old\n", encoding="utf-8")

    write_text_atomic(target, "new\n", prefix=".tmp-", suffix=".json")

    assert target.read_text(encoding="utf-8") == "new\n"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["out.json"]


def test_write_text_atomic_cleans_up_on_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("paramguard.io.atomic.os.replace", _boom)
    target = tmp_path / "out.json"

    with pytest.raises(OSError, match="disk full"):
        write_text_atomic(target, "{}", prefix=".tmp-", suffix=".json")

    assert list(tmp_path.iterdir()) == []
