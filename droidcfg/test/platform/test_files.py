from __future__ import annotations

from pathlib import Path

import pytest

from droidcfg.platform.files import atomic_write_text


def test_atomic_write_creates_parent_and_writes(tmp_path: Path) -> None:
    target = tmp_path / "out" / "descriptor.json"

    atomic_write_text(target, "{}\n")

    assert target.read_text(encoding="utf-8") == "{}\n"
    assert [p.name for p in target.parent.iterdir()] == ["descriptor.json"]


def test_atomic_write_replaces_existing(tmp_path: Path) -> None:
    target = tmp_path / "descriptor.json"
    target.write_text("old", encoding="utf-8")

    atomic_write_text(target, "new")

    assert target.read_text(encoding="utf-8") == "new"


def test_atomic_write_cleans_temp_on_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import droidcfg.platform.files as files

    def _boom(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(files.os, "replace", _boom)

    with pytest.raises(OSError, match="disk full"):
        atomic_write_text(tmp_path / "descriptor.json", "x")

    assert list(tmp_path.iterdir()) == []
