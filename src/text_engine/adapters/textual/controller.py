"""Textual-free controller that wires command dispatch into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Sequence

from text_engine.buffer import SessionView
from text_engine.commands import CommandDispatcher, CommandResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[SessionView], None]
    update_status: Callable[[str], None] = _noop
    show_results: Callable[[Sequence[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges CommandDispatcher + bus events to a Textual-friendly surface."""

    def __init__(self, dispatcher: CommandDispatcher, hooks: TextualUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()

    def submit(self, line: str) -> CommandResult:
        """Dispatch one command line typed by the user and refresh the UI."""

        self._log_state("command ->", line=line)
        result = self.dispatcher.dispatch(line)
        self._after_result(result)
        self._log_state(
            "result <-",
            status=result.status,
            message=result.message,
            lines=len(result.lines),
            quit=result.quit or None,
        )
        return result

    def _after_result(self, result: CommandResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        if result.lines:
            self.hooks.show_results(list(result.lines))
        self._refresh_buffer()

    def _subscribe_events(self) -> None:
        bus = self.dispatcher.context.bus
        for event in (
            "command.submit",
            "command.error",
            "command.quit",
            "command.root",
            "session.open",
            "session.edit",
            "session.undo",
            "session.save",
            "search.results",
            "index.updated",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.dispatcher.context.session.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        context = self.dispatcher.context
        session = context.session
        return {
            "session": session.name,
            "state": session.state.value,
            "path": str(session.path) if session.path else None,
            "history_depth": len(session.history),
            "dirty": session.dirty,
            "root": str(context.root),
            "index_keywords": len(context.index),
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
