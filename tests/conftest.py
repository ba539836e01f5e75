from __future__ import annotations

from pathlib import Path
from typing import Callable, Set

import pytest

from text_engine import storage
from text_engine.errors import StorageError
from text_engine.runtime import telemetry


@pytest.fixture(autouse=True, scope="session")
def quiet_telemetry() -> None:
    telemetry.configure(preset="quiet")


@pytest.fixture()
def text_tree(tmp_path: Path) -> Path:
    """``a.txt`` = "hello world", ``b.txt`` = "hello there"."""

    (tmp_path / "a.txt").write_text("hello world", encoding="utf-8")
    (tmp_path / "b.txt").write_text("hello there", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def unreadable(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], None]:
    """Register paths whose reads fail the way a permission error would."""

    blocked: Set[Path] = set()
    real_read_text = storage.read_text

    def read_text(path: Path | str, **kwargs: str) -> str:
        target = Path(path)
        if target in blocked:
            raise StorageError(f"Cannot read {target}: Permission denied", path=target)
        return real_read_text(path, **kwargs)

    monkeypatch.setattr(storage, "read_text", read_text)
    return blocked.add
