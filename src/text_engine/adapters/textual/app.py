"""Executable Textual app that hosts the text engine."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, RichLog, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use text_engine.adapters.textual.app"
    ) from exc

from text_engine.buffer import SessionView
from text_engine.commands import MENU, CommandDispatcher, create_context
from text_engine.runtime import EngineConfig, telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


def create_default_dispatcher(
    root: Path | str, *, config: Optional[EngineConfig] = None
) -> CommandDispatcher:
    """Build a dispatcher over a fresh session and an empty keyword index."""

    context = create_context(root, config=config or EngineConfig.from_env())
    return CommandDispatcher(context)


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    title: str = ""


class TextEngineApp(App[None]):
    """Minimal Textual UI: buffer view, results pane, status line, command input."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 2fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#results {
		height: 1fr;
		border: round $secondary;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		dock: bottom;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        root: Path | str,
        initial_file: Optional[str] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._root = Path(root)
        self._initial_file = initial_file
        self._config = config
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._results_widget: RichLog | None = None
        self._status_widget: Static | None = None
        self._command_widget: Input | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="main-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
            self._results_widget = RichLog(id="results", wrap=True)
            yield self._results_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        self._command_widget = Input(
            placeholder="command (type 'help' for the menu)", id="command-line"
        )
        yield self._command_widget
        yield Footer()

    def on_mount(self) -> None:
        dispatcher = create_default_dispatcher(self._root, config=self._config)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_results=self._show_results,
            handle_event=self._handle_event,
        )
        self.adapter = TextualEditorAdapter(dispatcher, hooks)
        self._show_results(list(MENU))
        self._update_status(f"Working in {self._root}")
        if self._initial_file:
            self.adapter.submit(f"open {self._initial_file}")
        if self._command_widget:
            self._command_widget.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        line = event.value
        event.input.value = ""
        result = self.adapter.submit(line)
        if result.quit:
            self.exit()

    def _update_buffer(self, view: SessionView) -> None:
        self._state.buffer_text = view.content if view.content is not None else ""
        self._state.title = view.title
        self.sub_title = self._state.title
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_results(self, lines: Sequence[str]) -> None:
        if not self._results_widget:
            return
        for line in lines:
            self._results_widget.write(line)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.error" and isinstance(payload, dict):
            self._update_status(f"{payload['error']}: {payload['message']}")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the text engine Textual editor.")
    parser.add_argument(
        "--root",
        default=telemetry.env("ROOT") or os.getcwd(),
        help="Directory that search and index scan (default: $TEXT_ENGINE_ROOT or cwd)",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="File to open on startup, relative to --root unless absolute",
    )
    parser.add_argument(
        "--log-preset",
        default="quiet",
        choices=telemetry.PRESETS,
        help="telelog preset; 'development' draws over the UI (default: quiet)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = TextEngineApp(root=args.root, initial_file=args.file)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
