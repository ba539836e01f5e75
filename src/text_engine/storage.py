"""Filesystem collaborators: whole-file text I/O and deterministic tree walks."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .runtime.config import DEFAULT_ENCODING, DEFAULT_TEXT_SUFFIX
from .errors import DocumentNotFoundError, StorageError


def read_text(path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the full content of ``path``.

    Bytes that are not valid in ``encoding`` come back as U+FFFD.
    """

    target = Path(path)
    if not target.is_file():
        raise DocumentNotFoundError(f"No such file: {target}", path=target)
    try:
        return target.read_text(encoding=encoding, errors="replace")
    except OSError as exc:
        raise StorageError(f"Cannot read {target}: {exc.strerror}", path=target) from exc


def write_text(
    path: Path | str, content: str, *, encoding: str = DEFAULT_ENCODING
) -> Path:
    """Persist ``content`` to ``path``, replacing whatever was there."""

    target = Path(path)
    try:
        target.write_text(content, encoding=encoding)
    except OSError as exc:
        raise StorageError(
            f"Cannot write {target}: {exc.strerror}", path=target
        ) from exc
    return target


def walk_text_files(
    root: Path | str, *, suffix: str = DEFAULT_TEXT_SUFFIX
) -> Iterator[Path]:
    """Yield files under ``root`` whose name ends with ``suffix``.

    Directories are descended in name order and files inside one directory
    are yielded in name order, so two walks of an unchanged tree agree.
    Symlinks are skipped. The suffix match is case-sensitive.
    """

    start = Path(root)
    if not start.is_dir():
        raise StorageError(f"Not a directory: {start}", path=start)

    def _raise(exc: OSError) -> None:
        raise StorageError(
            f"Cannot list {exc.filename}: {exc.strerror}", path=exc.filename
        ) from exc

    for current, dirnames, filenames in os.walk(start, onerror=_raise):
        dir_path = Path(current)
        dirnames[:] = sorted(
            name for name in dirnames if not (dir_path / name).is_symlink()
        )
        for filename in sorted(filenames):
            if not filename.endswith(suffix):
                continue
            file_path = dir_path / filename
            if file_path.is_symlink():
                continue
            yield file_path


__all__ = ["read_text", "write_text", "walk_text_files"]
