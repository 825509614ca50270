from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from clip_editor.adapters.textual import TextualEditorAdapter, TextualUIHooks
from clip_editor.buffer import BufferView
from clip_editor.interpreter import Interpreter
from clip_editor.session import FAREWELL


@dataclass
class Recorder:
    views: List[BufferView] = field(default_factory=list)
    statuses: List[str] = field(default_factory=list)
    events: List[tuple[str, object | None]] = field(default_factory=list)
    exits: int = 0
    logs: List[str] = field(default_factory=list)

    def request_exit(self) -> None:
        self.exits += 1

    def hooks(self) -> TextualUIHooks:
        return TextualUIHooks(
            update_buffer=self.views.append,
            update_status=self.statuses.append,
            handle_event=lambda name, payload: self.events.append((name, payload)),
            request_exit=self.request_exit,
            log=self.logs.append,
        )


def make_adapter(recorder: Recorder) -> TextualEditorAdapter:
    return TextualEditorAdapter(Interpreter(), recorder.hooks())


def test_adapter_pushes_initial_and_updated_views() -> None:
    recorder = Recorder()
    adapter = make_adapter(recorder)

    result = adapter.submit_line('"TYPE hello" "SELECT 0 1"')

    assert recorder.views[0].text is None
    assert recorder.views[-1].text == "hello"
    assert recorder.views[-1].selection is not None
    assert recorder.statuses[-1] == "Output: hello"
    assert result is not None and result.executed == 2
    assert adapter.history == ['"TYPE hello" "SELECT 0 1"']


def test_adapter_reports_command_errors_in_status() -> None:
    recorder = Recorder()
    adapter = make_adapter(recorder)

    adapter.submit_line('"TYPE ab" "SELECT 0 9"')

    assert recorder.statuses[-1].startswith("Output: ab | Invalid selection")
    assert any(name == "command.error" for name, _ in recorder.events)


def test_adapter_requests_exit_on_termination() -> None:
    recorder = Recorder()
    adapter = make_adapter(recorder)

    adapter.submit_line('"TYPE x" "whatever"')
    late = adapter.submit_line('"TYPE y"')

    assert recorder.exits == 1
    assert recorder.statuses[-1] == FAREWELL
    assert late is None
    names = [name for name, _ in recorder.events]
    assert "command.unrecognized" in names
    assert "session.exit" in names
    assert recorder.views[-1].text == "x"


def test_adapter_emits_log_lines() -> None:
    recorder = Recorder()
    adapter = make_adapter(recorder)

    adapter.submit_line('"TYPE a"')

    assert any(line.startswith("line ->") for line in recorder.logs)
    assert any(line.startswith("result <-") for line in recorder.logs)
    assert any(line.startswith("event ->") for line in recorder.logs)
