"""Exception types raised by the editor, storage, and search layers."""

from __future__ import annotations

from pathlib import Path


class TextEngineError(RuntimeError):
    """Base class for every failure the engine reports to its host."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DocumentNotFoundError(TextEngineError):
    """Raised when a path does not resolve to an existing file."""


class SessionNotOpenError(TextEngineError):
    """Raised when an operation needs loaded content and none is loaded."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation}: no file is open")
        self.operation = operation


class StorageError(TextEngineError):
    """Raised when reading, writing, or walking the filesystem fails."""


class InvalidKeywordError(TextEngineError, ValueError):
    """Raised when a search or index keyword is empty."""

    def __init__(self, keyword: str) -> None:
        super().__init__("Keyword must be a non-empty string")
        self.keyword = keyword


def ensure_keyword(keyword: str) -> str:
    if not isinstance(keyword, str) or not keyword:
        raise InvalidKeywordError(str(keyword))
    return keyword


__all__ = [
    "TextEngineError",
    "DocumentNotFoundError",
    "SessionNotOpenError",
    "StorageError",
    "InvalidKeywordError",
    "ensure_keyword",
]
