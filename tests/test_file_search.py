from __future__ import annotations

from pathlib import Path

import pytest

from text_engine.errors import InvalidKeywordError, StorageError
from text_engine.runtime import EngineConfig
from text_engine.search import FileSearch


def names(paths) -> list[str]:
    return [Path(path).name for path in paths]


def test_search_scenario(text_tree: Path) -> None:
    searcher = FileSearch()

    assert names(searcher.search_files(text_tree, "hello")) == ["a.txt", "b.txt"]
    assert names(searcher.search_files(text_tree, "world")) == ["a.txt"]


def test_search_returns_paths_under_root(text_tree: Path) -> None:
    found = list(FileSearch().search_files(text_tree, "world"))

    assert found == [text_tree / "a.txt"]


def test_search_is_case_sensitive(text_tree: Path) -> None:
    assert list(FileSearch().search_files(text_tree, "Hello")) == []


def test_search_without_match_is_empty(text_tree: Path) -> None:
    assert list(FileSearch().search_files(text_tree, "absent")) == []


def test_search_descends_into_subdirectories(text_tree: Path) -> None:
    nested = text_tree / "nested"
    nested.mkdir()
    (nested / "c.txt").write_text("say hello", encoding="utf-8")
    (nested / "c.md").write_text("hello markdown", encoding="utf-8")

    found = list(FileSearch().search_files(text_tree, "hello"))

    assert [path.relative_to(text_tree).as_posix() for path in found] == [
        "a.txt",
        "b.txt",
        "nested/c.txt",
    ]


def test_search_matches_across_line_breaks(tmp_path: Path) -> None:
    (tmp_path / "multi.txt").write_text("first\nsecond", encoding="utf-8")

    assert names(FileSearch().search_files(tmp_path, "first\nsec")) == ["multi.txt"]


def test_search_uses_configured_suffix(text_tree: Path) -> None:
    (text_tree / "notes.md").write_text("hello md", encoding="utf-8")
    searcher = FileSearch(config=EngineConfig(text_suffix=".md"))

    assert names(searcher.search_files(text_tree, "hello")) == ["notes.md"]


def test_search_rescans_on_every_call(text_tree: Path) -> None:
    searcher = FileSearch()
    assert names(searcher.search_files(text_tree, "there")) == ["b.txt"]

    (text_tree / "a.txt").write_text("over there", encoding="utf-8")

    assert names(searcher.search_files(text_tree, "there")) == ["a.txt", "b.txt"]


def test_search_rejects_empty_keyword_immediately(text_tree: Path) -> None:
    with pytest.raises(InvalidKeywordError):
        FileSearch().search_files(text_tree, "")


def test_search_tolerates_undecodable_files(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("hello world", encoding="utf-8")
    (tmp_path / "b.txt").write_bytes("hello caf\u00e9".encode("latin-1"))
    (tmp_path / "c.txt").write_bytes(b"\xff\xfe\xfa")

    assert names(FileSearch().search_files(tmp_path, "hello")) == ["a.txt", "b.txt"]


def test_search_surfaces_read_errors(text_tree: Path, unreadable) -> None:
    unreadable(text_tree / "b.txt")
    found = FileSearch().search_files(text_tree, "hello")

    assert next(found) == text_tree / "a.txt"
    with pytest.raises(StorageError):
        next(found)
