from __future__ import annotations

from pathlib import Path

import pytest

from text_engine.errors import DocumentNotFoundError, StorageError
from text_engine.storage import read_text, walk_text_files, write_text


def test_walk_is_sorted_and_recursive(tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_text("", encoding="utf-8")
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    nested = tmp_path / "sub" / "deeper"
    nested.mkdir(parents=True)
    (nested / "c.txt").write_text("", encoding="utf-8")
    (tmp_path / "sub" / "d.txt").write_text("", encoding="utf-8")

    found = [path.relative_to(tmp_path).as_posix() for path in walk_text_files(tmp_path)]

    assert found == ["a.txt", "b.txt", "sub/d.txt", "sub/deeper/c.txt"]


def test_walk_suffix_match_is_case_sensitive(tmp_path: Path) -> None:
    (tmp_path / "keep.txt").write_text("", encoding="utf-8")
    (tmp_path / "skip.TXT").write_text("", encoding="utf-8")
    (tmp_path / "skip.md").write_text("", encoding="utf-8")

    found = [path.name for path in walk_text_files(tmp_path)]

    assert found == ["keep.txt"]


def test_walk_honours_custom_suffix(tmp_path: Path) -> None:
    (tmp_path / "notes.md").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")

    found = [path.name for path in walk_text_files(tmp_path, suffix=".md")]

    assert found == ["notes.md"]


def test_walk_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(StorageError):
        list(walk_text_files(tmp_path / "missing"))


def test_read_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        read_text(tmp_path / "missing.txt")


def test_read_replaces_undecodable_bytes(tmp_path: Path) -> None:
    target = tmp_path / "legacy.txt"
    target.write_bytes("caf\u00e9 hello".encode("latin-1"))

    assert read_text(target) == "caf\ufffd hello"


def test_read_honours_encoding(tmp_path: Path) -> None:
    target = tmp_path / "legacy.txt"
    target.write_bytes("caf\u00e9".encode("latin-1"))

    assert read_text(target, encoding="latin-1") == "caf\u00e9"


def test_write_then_read(tmp_path: Path) -> None:
    target = write_text(tmp_path / "out.txt", "line 1\nline 2")

    assert read_text(target) == "line 1\nline 2"
