"""Shared context, results, and event bus for command handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from text_engine.buffer import EditorSession
from text_engine.runtime.config import EngineConfig
from text_engine.search import FileSearch, KeywordIndex


@dataclass(slots=True)
class CommandResult:
    """Result returned from dispatching one command line."""

    status: str = "ok"
    message: Optional[str] = None
    lines: Tuple[str, ...] = ()
    quit: bool = False

    @property
    def failed(self) -> bool:
        return self.status in {"error", "command_error", "usage"}


@dataclass(slots=True)
class CommandContext:
    """Services every command handler can reach.

    ``root`` is the work directory: search and index scan it, and relative
    ``open``/``save`` paths resolve against it.
    """

    session: EditorSession
    index: KeywordIndex
    searcher: FileSearch
    bus: "CommandBus"
    root: Path
    extras: Dict[str, object] = field(default_factory=dict)

    def resolve(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        if path.is_absolute():
            return path
        return self.root / path


class CommandBus:
    """Minimal event bus letting hosts observe what commands did."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


def create_context(
    root: Path | str, *, config: Optional[EngineConfig] = None
) -> CommandContext:
    """Build a context whose session, index, and searcher share ``config``."""

    config = config or EngineConfig()
    searcher = FileSearch(config=config)
    return CommandContext(
        session=EditorSession(config=config),
        index=KeywordIndex(config=config, searcher=searcher),
        searcher=searcher,
        bus=CommandBus(),
        root=Path(root),
    )


__all__ = ["CommandBus", "CommandContext", "CommandResult", "create_context"]
