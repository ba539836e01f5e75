"""Editor session façade combining loaded content, snapshot history, and storage."""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import ContextManager, Optional

from text_engine import storage
from text_engine.errors import SessionNotOpenError
from text_engine.runtime import telemetry
from text_engine.runtime.config import EngineConfig

from .state import SessionState, SessionView
from .undo import SnapshotStore

LOGGER_NAME = "text_engine.session"


class EditorSession:
    """Holds one file's content and undoes edits by restoring snapshots.

    Every mutation goes through a :class:`Transaction`, so a failing ``open``
    or ``edit`` leaves both the content and the history untouched.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        config: Optional[EngineConfig] = None,
        history: Optional[SnapshotStore] = None,
        logger_name: str | None = None,
    ) -> None:
        self.name = name
        self.config = config or EngineConfig()
        self.history = history if history is not None else SnapshotStore()
        self.path: Optional[Path] = None
        self.content: Optional[str] = None
        self._clean_content: Optional[str] = None
        self._logger_name = logger_name or LOGGER_NAME

    @property
    def state(self) -> SessionState:
        return SessionState.OPEN if self.content is not None else SessionState.UNOPENED

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.OPEN

    @property
    def dirty(self) -> bool:
        return self.is_open and self.content != self._clean_content

    def view(self) -> SessionView:
        return SessionView(
            path=self.path,
            content=self.content,
            state=self.state,
            history_depth=len(self.history),
            dirty=self.dirty,
        )

    def open(self, path: Path | str) -> SessionView:
        """Load ``path`` and start a fresh history seeded with its content."""

        target = Path(path)
        with Transaction(self, "open", path=target) as tx:
            loaded = storage.read_text(target, encoding=self.config.encoding)
            self.history.clear()
            tx.commit(loaded, loaded)
            self.path = target
            self._clean_content = loaded
        return self.view()

    def edit(self, new_content: str) -> SessionView:
        if self.content is None:
            raise SessionNotOpenError("edit")
        if not isinstance(new_content, str):
            raise TypeError("new_content must be a string")
        with Transaction(self, "edit", path=self.path) as tx:
            tx.commit(self.content, new_content)
        return self.view()

    def undo(self) -> bool:
        """Restore the newest snapshot; return ``False`` when history is empty."""

        restored = self.history.pop_latest()
        if restored is None:
            telemetry.record_event(
                "session.undo_noop",
                level="debug",
                data={"session": self.name},
                logger_name=self._logger_name,
            )
            return False
        self.content = restored
        telemetry.record_event(
            "session.undo",
            data={"session": self.name, "remaining": len(self.history)},
            logger_name=self._logger_name,
        )
        return True

    def save(self, path: Path | str | None = None) -> Path:
        """Write the current content to ``path`` (defaults to the opened file)."""

        if self.content is None:
            raise SessionNotOpenError("save")
        target = Path(path) if path is not None else self.path
        if target is None:
            raise SessionNotOpenError("save")
        with telemetry.span(
            "session::save",
            logger_name=self._logger_name,
            component="session",
            metadata={"session": self.name, "path": target},
        ):
            storage.write_text(target, self.content, encoding=self.config.encoding)
        self.path = target
        self._clean_content = self.content
        return target


class Transaction(AbstractContextManager["Transaction"]):
    """Scope for one content change; ``commit`` pushes a snapshot and swaps content."""

    def __init__(
        self, session: EditorSession, label: str, *, path: Optional[Path] = None
    ) -> None:
        self.session = session
        self.label = label
        self.path = path
        self.committed = False
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        metadata = {"session": self.session.name}
        if self.path is not None:
            metadata["path"] = str(self.path)
        self._span_cm = telemetry.span(
            f"session::{self.label}",
            logger_name=self.session._logger_name,
            component="session",
            metadata=metadata,
        )
        self._handle = self._span_cm.__enter__()
        return self

    def commit(self, snapshot: str, content: str) -> None:
        self.session.history.push(snapshot)
        self.session.content = content
        self.committed = True
        if self._handle is not None:
            self._handle.done(history_depth=len(self.session.history))

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditorSession", "Transaction", "LOGGER_NAME"]
