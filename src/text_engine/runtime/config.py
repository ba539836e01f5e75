"""Engine configuration and defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .telemetry import env

DEFAULT_TEXT_SUFFIX = ".txt"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Settings shared by the editor session, the keyword index and file search.

    ``text_suffix`` is matched case-sensitively against file names, so
    ``notes.TXT`` is not a text file under the default ``".txt"``.
    """

    text_suffix: str = DEFAULT_TEXT_SUFFIX
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if not self.text_suffix:
            raise ValueError("text_suffix cannot be empty")
        if not self.encoding:
            raise ValueError("encoding cannot be empty")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            text_suffix=env("TEXT_SUFFIX") or DEFAULT_TEXT_SUFFIX,
            encoding=env("ENCODING") or DEFAULT_ENCODING,
        )

    def with_overrides(self, **changes: str) -> "EngineConfig":
        return replace(self, **changes)


__all__ = ["EngineConfig", "DEFAULT_TEXT_SUFFIX", "DEFAULT_ENCODING"]
