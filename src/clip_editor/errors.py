"""Exception hierarchy shared by the buffer, parser, and interpreter."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for every error raised by the editor core."""


class BufferValidationError(EditorError):
    """Raised when an offset handed to the text store is out of bounds."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidRange(EditorError):
    """Raised when a selection range does not fit inside the buffer text."""

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(
            f"Invalid selection [{start}, {end}] for text of length {length}"
        )
        self.start = start
        self.end = end
        self.length = length


class UnrecognizedCommandTreatedAsExit(EditorError):
    """Condition recorded when an unknown keyword ends the session.

    The interpreter never raises this; it is attached to the batch result so
    callers can tell an accidental stop from an intentional ``EXIT``.
    """

    def __init__(self, keyword: str, raw: str) -> None:
        super().__init__(f"Unrecognized command '{keyword}' treated as exit")
        self.keyword = keyword
        self.raw = raw


class SessionClosedError(EditorError):
    """Raised when commands are fed to an interpreter that already stopped."""


class EmptyQueueError(EditorError, IndexError):
    """Raised when dequeuing from an empty command queue."""


__all__ = [
    "EditorError",
    "BufferValidationError",
    "InvalidRange",
    "UnrecognizedCommandTreatedAsExit",
    "SessionClosedError",
    "EmptyQueueError",
]
