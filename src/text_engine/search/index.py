"""Keyword index mapping search terms to the files that contain them."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Optional

from text_engine.errors import ensure_keyword
from text_engine.runtime.config import EngineConfig
from text_engine.runtime.telemetry import span

from .models import IndexEntry, IndexStats
from .scanner import LOGGER_NAME, FileSearch


class KeywordIndex:
    """Owns keyword entries built on demand, one directory scan per keyword.

    Entries accumulate across keywords. Rebuilding a keyword recomputes its
    entry from scratch and replaces the old one in a single assignment, so a
    failed rebuild leaves the previous entry in place.
    """

    def __init__(
        self,
        *,
        config: Optional[EngineConfig] = None,
        searcher: Optional[FileSearch] = None,
        logger_name: str | None = None,
    ) -> None:
        if searcher is not None and config is not None and config != searcher.config:
            raise ValueError("config does not match the searcher's config")
        self._logger_name = logger_name or LOGGER_NAME
        if searcher is None:
            searcher = FileSearch(
                config=config or EngineConfig(), logger_name=self._logger_name
            )
        self._searcher = searcher
        self.config = searcher.config
        self._entries: Dict[str, IndexEntry] = {}
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def index_directory(self, root: Path | str, keyword: str) -> IndexEntry:
        ensure_keyword(keyword)
        with span(
            "index::build",
            logger_name=self._logger_name,
            component="index",
            metadata={"keyword": keyword, "root": root},
        ) as handle:
            paths = tuple(self._searcher.search_files(root, keyword))
            entry = IndexEntry(keyword=keyword, root=Path(root), paths=paths)
            replaced = keyword in self._entries
            self._entries[keyword] = entry
            self._revision += 1
            handle.done(matches=entry.count, replaced=replaced)
            return entry

    def print_index(self) -> Iterator[IndexEntry]:
        """Yield entries in the order their keywords were first indexed.

        Each call starts a fresh pass over a copy of the entries, so it can be
        repeated freely and is unaffected by rebuilds during iteration.
        """

        yield from tuple(self._entries.values())

    def get(self, keyword: str) -> Optional[IndexEntry]:
        return self._entries.get(keyword)

    def keywords(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def stats(self) -> IndexStats:
        return IndexStats(
            keyword_count=len(self._entries),
            path_count=len(
                {path for entry in self._entries.values() for path in entry.paths}
            ),
            revision=self._revision,
        )

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["KeywordIndex"]
