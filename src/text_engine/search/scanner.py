"""One-shot keyword search over a directory tree of text files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from text_engine import storage
from text_engine.errors import ensure_keyword
from text_engine.runtime import telemetry
from text_engine.runtime.config import EngineConfig

LOGGER_NAME = "text_engine.search"


def contains_keyword(path: Path, keyword: str, *, encoding: str) -> bool:
    """Case-sensitive literal substring test over the whole file."""

    return keyword in storage.read_text(path, encoding=encoding)


class FileSearch:
    """Stateless scanner: every call walks the filesystem again."""

    def __init__(
        self,
        *,
        config: Optional[EngineConfig] = None,
        logger_name: str | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._logger_name = logger_name or LOGGER_NAME

    def search_files(self, root: Path | str, keyword: str) -> Iterator[Path]:
        """Lazily yield text files under ``root`` containing ``keyword``.

        The keyword is validated immediately; the walk and the reads happen
        while the result is consumed, and read errors surface there.
        """

        ensure_keyword(keyword)
        return self._scan(Path(root), keyword)

    def _scan(self, root: Path, keyword: str) -> Iterator[Path]:
        scanned = 0
        matched = 0
        for path in storage.walk_text_files(root, suffix=self.config.text_suffix):
            scanned += 1
            if contains_keyword(path, keyword, encoding=self.config.encoding):
                matched += 1
                yield path
        telemetry.record_event(
            "search.complete",
            level="debug",
            data={
                "root": root,
                "keyword": keyword,
                "scanned": scanned,
                "matched": matched,
            },
            logger_name=self._logger_name,
        )


__all__ = ["FileSearch", "contains_keyword"]
