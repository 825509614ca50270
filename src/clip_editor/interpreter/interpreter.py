"""Command loop that drains a queue into the editor buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from clip_editor.buffer import BufferDelta, EditorBuffer
from clip_editor.commands import (
    Command,
    CommandParser,
    CommandQueue,
    Copy,
    Exit,
    MoveCursor,
    Paste,
    Select,
    Type,
    split_batch,
)
from clip_editor.errors import (
    EditorError,
    SessionClosedError,
    UnrecognizedCommandTreatedAsExit,
)
from clip_editor.runtime import telemetry

from .bus import EventBus


@dataclass(slots=True)
class BatchResult:
    """Outcome of one drain cycle."""

    text: Optional[str]
    executed: int = 0
    stopped: bool = False
    exit_command: Optional[Exit] = None
    errors: List[EditorError] = field(default_factory=list)

    @property
    def unrecognized(self) -> bool:
        return self.exit_command is not None and not self.exit_command.recognized


class Interpreter:
    """Owns the editor buffer and applies queued commands to it.

    The loop is re-entrant: buffer state carries over between ``drain`` calls
    until an exit command stops the session.
    """

    def __init__(
        self,
        buffer: EditorBuffer | None = None,
        *,
        parser: CommandParser | None = None,
        bus: EventBus | None = None,
        logger_name: str | None = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else EditorBuffer()
        self.parser = parser or CommandParser()
        self.bus = bus or EventBus()
        self._logger_name = logger_name or "clip_editor.interpreter"
        self._stopped = False
        self._handlers: Dict[str, Callable[[Command], BufferDelta]] = {
            Type.tag: lambda cmd: self.buffer.type_text(cmd.payload),
            Select.tag: lambda cmd: self.buffer.select(cmd.start, cmd.end),
            MoveCursor.tag: lambda cmd: self.buffer.move_cursor(cmd.offset),
            Copy.tag: lambda cmd: self.buffer.copy(),
            Paste.tag: lambda cmd: self.buffer.paste(cmd.steps_back),
        }

    @property
    def stopped(self) -> bool:
        return self._stopped

    def run_line(self, line: str) -> BatchResult:
        return self.run_commands(split_batch(line))

    def run_commands(self, commands: Iterable[str]) -> BatchResult:
        return self.drain(CommandQueue(commands))

    def drain(self, queue: CommandQueue) -> BatchResult:
        """Execute queued commands in order until the queue empties or exit.

        Commands queued after an exit stay in ``queue``.
        """

        if self._stopped:
            raise SessionClosedError("interpreter already stopped")

        result = BatchResult(text=None)
        with telemetry.span(
            "interpreter::drain",
            logger_name=self._logger_name,
            component="interpreter",
            metadata={"pending": len(queue)},
        ) as handle:
            while not queue.is_empty():
                raw = queue.dequeue()
                command = self.parser.parse(raw)
                if isinstance(command, Exit):
                    self._stop(command, result)
                    break
                error = self.execute(command, raw=raw)
                result.executed += 1
                if error is not None:
                    result.errors.append(error)
            handle.add_metadata("executed", result.executed)

        result.text = self.buffer.render()
        self.bus.emit("batch.complete", result)
        return result

    def execute(self, command: Command, *, raw: str = "") -> Optional[EditorError]:
        """Apply one non-exit command, returning the error it raised if any.

        A failing command leaves the buffer as it was and never ends the
        session.
        """

        handler = self._handlers.get(command.tag)
        if handler is None:
            raise ValueError(f"No handler for command '{command.tag}'")
        try:
            with telemetry.span(
                f"command::{command.tag}",
                logger_name=self._logger_name,
                metadata={"raw": raw},
            ):
                delta = handler(command)
        except EditorError as exc:
            telemetry.log_with(
                "warning",
                "command::error",
                {"raw": raw, "command": command.tag, "error": str(exc)},
                logger_name=self._logger_name,
            )
            self.bus.emit(
                "command.error", {"raw": raw, "command": command, "error": exc}
            )
            return exc
        self.bus.emit(
            "command.execute", {"raw": raw, "command": command, "delta": delta}
        )
        return None

    def _stop(self, command: Exit, result: BatchResult) -> None:
        self._stopped = True
        result.stopped = True
        result.exit_command = command
        if not command.recognized:
            condition = UnrecognizedCommandTreatedAsExit(command.keyword, command.raw)
            result.errors.append(condition)
            telemetry.log_with(
                "warning",
                "command::unrecognized",
                {"keyword": command.keyword, "raw": command.raw},
                logger_name=self._logger_name,
            )
            self.bus.emit("command.unrecognized", condition)
        telemetry.record_event(
            "session.exit",
            data={"keyword": command.keyword, "recognized": command.recognized},
            logger_name=self._logger_name,
        )
        self.bus.emit("session.exit", command)


__all__ = ["BatchResult", "Interpreter"]
