"""Command-line handlers mapping the editor menu onto the engine."""

from __future__ import annotations

from collections import deque
from typing import Callable, Dict, Iterable, List, MutableMapping, Tuple, cast

from text_engine.errors import StorageError, TextEngineError
from text_engine.runtime import telemetry
from text_engine.search import IndexEntry

from .base import CommandContext, CommandResult

CommandHandler = Callable[[CommandContext, str], CommandResult]

LOGGER_NAME = "text_engine.commands"
HISTORY_LIMIT = 200


def _command_state(context: CommandContext) -> MutableMapping[str, object]:
    state = cast(
        MutableMapping[str, object], context.extras.setdefault("command_state", {})
    )
    state.setdefault("history", deque(maxlen=HISTORY_LIMIT))
    return state


def _split_command(text: str) -> Tuple[str, str]:
    """Split ``text`` after the command word; the rest is returned untouched."""

    for position, char in enumerate(text):
        if char.isspace():
            return text[:position], text[position + 1 :]
    return text, ""


def dispatch(context: CommandContext, line: str) -> CommandResult:
    """Run one command line such as ``open notes.txt`` or ``6 todo``."""

    text = line.rstrip("\r\n").lstrip()
    context.bus.emit("command.submit", text)
    if not text.strip():
        return CommandResult(status="command_empty")
    history = _command_state(context).get("history")
    if isinstance(history, deque):
        history.append(text)
    command, argument = _split_command(text)
    command = command.lower()
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        return _unknown_command(context, command)
    if handler is not _handle_edit:
        argument = argument.strip()
    try:
        return handler(context, argument)
    except TextEngineError as exc:
        return _failed(context, command, exc)


def _unknown_command(context: CommandContext, command: str) -> CommandResult:
    context.bus.emit("command.error", command)
    return CommandResult(
        status="command_error",
        message=f"Unknown command '{command}'. Type 'help' for the menu.",
    )


def _failed(
    context: CommandContext, command: str, exc: TextEngineError
) -> CommandResult:
    payload = {
        "command": command,
        "error": type(exc).__name__,
        "message": str(exc),
        "path": exc.path,
    }
    telemetry.record_event(
        "command.failed", level="warning", data=payload, logger_name=LOGGER_NAME
    )
    context.bus.emit("command.error", payload)
    return CommandResult(status="error", message=str(exc))


def _usage(text: str) -> CommandResult:
    return CommandResult(status="usage", message=f"Usage: {text}")


def _handle_open(context: CommandContext, argument: str) -> CommandResult:
    if not argument:
        return _usage("open <path>")
    view = context.session.open(context.resolve(argument))
    context.bus.emit("session.open", view)
    return CommandResult(status="opened", message=f"Opened {view.path}")


def _handle_edit(context: CommandContext, argument: str) -> CommandResult:
    if not argument:
        return _usage("edit <new content>  (use \\n for line breaks)")
    view = context.session.edit(argument.replace("\\n", "\n"))
    context.bus.emit("session.edit", view)
    return CommandResult(status="edited", message="Content edited.")


def _handle_undo(context: CommandContext, argument: str) -> CommandResult:
    del argument
    restored = context.session.undo()
    context.bus.emit("session.undo", restored)
    if not restored:
        return CommandResult(status="undo_noop", message="Nothing to undo.")
    return CommandResult(status="undone", message="Last change undone.")


def _handle_save(context: CommandContext, argument: str) -> CommandResult:
    target = context.resolve(argument) if argument else None
    saved = context.session.save(target)
    context.bus.emit("session.save", saved)
    return CommandResult(status="saved", message=f"Saved {saved}")


def _handle_search(context: CommandContext, argument: str) -> CommandResult:
    if not argument:
        return _usage("search <keyword>")
    matches = list(context.searcher.search_files(context.root, argument))
    context.bus.emit("search.results", {"keyword": argument, "paths": matches})
    return CommandResult(
        status="search",
        message=f"{len(matches)} file(s) contain '{argument}'",
        lines=tuple(str(path) for path in matches),
    )


def _handle_index(context: CommandContext, argument: str) -> CommandResult:
    if not argument:
        return _usage("index <keyword>")
    entry = context.index.index_directory(context.root, argument)
    context.bus.emit("index.updated", entry)
    return CommandResult(
        status="indexed",
        message=f"Indexed '{entry.keyword}': {entry.count} file(s)",
    )


def _handle_show(context: CommandContext, argument: str) -> CommandResult:
    del argument
    lines = render_index(context.index.print_index())
    if not lines:
        return CommandResult(status="index_empty", message="Index is empty.")
    return CommandResult(status="index", lines=tuple(lines))


def _handle_root(context: CommandContext, argument: str) -> CommandResult:
    if not argument:
        return CommandResult(status="root", message=str(context.root))
    target = context.resolve(argument)
    if not target.is_dir():
        raise StorageError(f"Not a directory: {target}", path=target)
    context.root = target
    context.bus.emit("command.root", target)
    return CommandResult(status="root", message=f"Working in {target}")


def _handle_help(context: CommandContext, argument: str) -> CommandResult:
    del context, argument
    return CommandResult(status="help", lines=MENU)


def _handle_quit(context: CommandContext, argument: str) -> CommandResult:
    del argument
    context.bus.emit("command.quit", {"dirty": context.session.dirty})
    return CommandResult(status="quit", message="Bye.", quit=True)


def render_index(entries: Iterable[IndexEntry]) -> List[str]:
    lines: List[str] = []
    for entry in entries:
        lines.append(f"Keyword: {entry.keyword}")
        lines.extend(f"  {path}" for path in entry.paths)
    return lines


MENU = (
    "1. open <path>      Open a file",
    "2. edit <text>      Replace the content",
    "3. undo             Undo the last change",
    "4. save [path]      Save the file",
    "5. search <kw>      Search files for a keyword",
    "6. index <kw>       Index the directory for a keyword",
    "7. show             Print files by index",
    "8. quit             Exit",
    "   root [dir]       Show or change the working directory",
)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "open": _handle_open,
    "o": _handle_open,
    "1": _handle_open,
    "edit": _handle_edit,
    "e": _handle_edit,
    "2": _handle_edit,
    "undo": _handle_undo,
    "u": _handle_undo,
    "3": _handle_undo,
    "save": _handle_save,
    "w": _handle_save,
    "4": _handle_save,
    "search": _handle_search,
    "find": _handle_search,
    "5": _handle_search,
    "index": _handle_index,
    "6": _handle_index,
    "show": _handle_show,
    "print": _handle_show,
    "7": _handle_show,
    "quit": _handle_quit,
    "exit": _handle_quit,
    "q": _handle_quit,
    "8": _handle_quit,
    "root": _handle_root,
    "cd": _handle_root,
    "help": _handle_help,
    "?": _handle_help,
}


class CommandDispatcher:
    """Binds a :class:`CommandContext` to :func:`dispatch`."""

    def __init__(self, context: CommandContext) -> None:
        self.context = context

    def dispatch(self, line: str) -> CommandResult:
        return dispatch(self.context, line)

    def history(self) -> tuple[str, ...]:
        entries = _command_state(self.context).get("history")
        return tuple(entries) if isinstance(entries, deque) else ()

    @staticmethod
    def commands() -> tuple[str, ...]:
        return tuple(sorted(_COMMAND_HANDLERS))


__all__ = ["CommandDispatcher", "MENU", "dispatch", "render_index"]
