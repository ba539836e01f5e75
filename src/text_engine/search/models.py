"""Dataclasses describing keyword index entries and index statistics."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """Files under ``root`` that contained ``keyword`` when the entry was built."""

    keyword: str
    root: Path
    paths: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        if not self.keyword:
            raise ValueError("keyword cannot be empty")
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "paths", _normalize_paths(self.paths))

    @property
    def count(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, (str, Path)):
            return Path(path) in self.paths
        return False


@dataclass(frozen=True, slots=True)
class IndexStats:
    """Lightweight snapshot describing index state."""

    keyword_count: int
    path_count: int
    revision: int


def _normalize_paths(paths: Iterable[Path | str]) -> tuple[Path, ...]:
    # Keep walk order; a path shows up once per keyword.
    return tuple(dict.fromkeys(Path(path) for path in paths))


__all__ = ["IndexEntry", "IndexStats"]
