"""Adapter that feeds input lines to the interpreter and reports to UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from clip_editor.buffer import BufferView
from clip_editor.errors import SessionClosedError
from clip_editor.interpreter import BatchResult, Interpreter
from clip_editor.session import FAREWELL, format_output


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an ``Interpreter`` and its bus events to a UI surface."""

    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        hooks: Optional[TextualUIHooks] = None,
    ) -> None:
        self.interpreter = interpreter or Interpreter()
        self.hooks = hooks or TextualUIHooks(update_buffer=_noop)
        self.history: list[str] = []
        self._subscribe_events()
        self._refresh_buffer()

    def submit_line(self, line: str) -> Optional[BatchResult]:
        """Run one input line as a batch; ignored once the session stopped."""

        if self.interpreter.stopped:
            self.hooks.update_status(FAREWELL)
            return None
        self._log_state("line ->", line=line)
        self.history.append(line)
        try:
            result = self.interpreter.run_line(line)
        except SessionClosedError:
            self.hooks.update_status(FAREWELL)
            return None
        self._refresh_buffer()
        self.hooks.update_status(self._status_for(result))
        self._log_state(
            "result <-",
            executed=result.executed,
            stopped=result.stopped,
            errors=len(result.errors),
        )
        if result.stopped:
            self.hooks.request_exit()
        return result

    def _status_for(self, result: BatchResult) -> str:
        if result.stopped:
            return FAREWELL
        if result.errors:
            return f"{format_output(result.text)} | {result.errors[-1]}"
        return format_output(result.text)

    def _subscribe_events(self) -> None:
        bus = self.interpreter.bus
        for event in (
            "command.execute",
            "command.error",
            "command.unrecognized",
            "session.exit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.interpreter.buffer.snapshot())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.interpreter.buffer
        return {
            "cursor": buffer.cursor,
            "selection": buffer.selection,
            "clipboard": len(buffer.clipboard),
            "buffer": buffer.name,
            "version": buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
