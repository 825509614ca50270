"""Line-oriented session protocol around the interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from clip_editor.interpreter import BatchResult, Interpreter
from clip_editor.runtime import telemetry

DEFAULT_PROMPT = "Input: "
OUTPUT_PREFIX = "Output: "
NULL_TEXT = "(null)"
FAREWELL = "Leaving text editor..."


def format_output(text: Optional[str]) -> str:
    """Render the buffer text for an ``Output:`` line; unset shows ``(null)``."""

    return f"{OUTPUT_PREFIX}{NULL_TEXT if text is None else text}"


@dataclass
class SessionConfig:
    prompt: str = DEFAULT_PROMPT
    show_prompt: bool = True

    @classmethod
    def from_env(cls) -> "SessionConfig":
        return cls(
            prompt=telemetry.env("PROMPT", DEFAULT_PROMPT) or DEFAULT_PROMPT,
            show_prompt=not telemetry.env_flag("QUIET_PROMPT", False),
        )


class Session:
    """Reads one batch per line, prints the buffer after each, stops on exit."""

    def __init__(
        self,
        interpreter: Interpreter | None = None,
        *,
        config: SessionConfig | None = None,
    ) -> None:
        self.interpreter = interpreter or Interpreter()
        self.config = config or SessionConfig()
        self.logger = telemetry.get_logger("clip_editor.session")
        self.batches = 0

    def feed(self, line: str) -> BatchResult:
        self.batches += 1
        with telemetry.span(
            "session::batch",
            component="session",
            metadata={"batch": self.batches},
        ):
            return self.interpreter.run_line(line)

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        while not self.interpreter.stopped:
            if self.config.show_prompt:
                stdout.write(self.config.prompt)
                stdout.flush()
            line = stdin.readline()
            if not line:
                telemetry.record_event("session.eof", data={"batches": self.batches})
                break
            result = self.feed(line)
            stdout.write(format_output(result.text) + "\n")
        if self.interpreter.stopped:
            stdout.write(FAREWELL + "\n")
        stdout.flush()
        return 0


__all__ = [
    "DEFAULT_PROMPT",
    "FAREWELL",
    "NULL_TEXT",
    "OUTPUT_PREFIX",
    "Session",
    "SessionConfig",
    "format_output",
]
