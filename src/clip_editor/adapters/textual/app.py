"""Textual app hosting the editor interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

try:  # pragma: no cover - imported only when the TUI is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use clip_editor.adapters.textual.app"
    ) from exc

from rich.text import Text

from clip_editor.buffer import BufferView
from clip_editor.interpreter import Interpreter
from clip_editor.runtime import telemetry
from clip_editor.session import NULL_TEXT

from .controller import TextualEditorAdapter, TextualUIHooks


@dataclass
class UIState:
    buffer_text: Text | str = ""
    status_text: str = ""


def render_view(view: BufferView) -> Text:
    if view.text is None:
        return Text(NULL_TEXT, style="dim")
    rendered = Text(view.text)
    if view.selection is not None:
        rendered.stylize("reverse", view.selection.start, view.selection.end + 1)
    rendered.append(f"\n\ncursor={view.cursor} clipboard={len(view.clipboard)}", "dim")
    return rendered


class ClipEditorApp(App[None]):
    """Input line for command batches above a live buffer view."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, interpreter: Optional[Interpreter] = None) -> None:
        super().__init__()
        self._state = UIState()
        self._interpreter = interpreter
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("clip_editor.tui")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Input(placeholder='"TYPE hello" "SELECT 0 4" "COPY"', id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
            request_exit=self._request_exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self._interpreter, hooks)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter is None:
            return
        self.adapter.submit_line(event.value)
        event.input.value = ""

    def _update_buffer(self, view: BufferView) -> None:
        self._state.buffer_text = render_view(view)
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(Text(status))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name in {"command.error", "command.unrecognized"}:
            self.notify(f"{name}: {payload}", severity="warning")

    def _request_exit(self) -> None:
        self.set_timer(0.5, self.exit)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def main(argv: Optional[Sequence[str]] = None) -> None:
    del argv
    ClipEditorApp().run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
