"""Tagged command values produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


@dataclass(frozen=True, slots=True)
class Type:
    payload: str
    tag: ClassVar[str] = "type"


@dataclass(frozen=True, slots=True)
class Select:
    start: int
    end: int
    tag: ClassVar[str] = "select"


@dataclass(frozen=True, slots=True)
class MoveCursor:
    offset: int
    tag: ClassVar[str] = "move_cursor"


@dataclass(frozen=True, slots=True)
class Copy:
    tag: ClassVar[str] = "copy"


@dataclass(frozen=True, slots=True)
class Paste:
    """``steps_back=None`` pastes the latest clipboard entry."""

    steps_back: Optional[int] = None
    tag: ClassVar[str] = "paste"

    @property
    def most_recent(self) -> bool:
        return self.steps_back is None


@dataclass(frozen=True, slots=True)
class Exit:
    """Session termination.

    ``recognized`` is ``False`` when an unknown keyword fell back to exit.
    """

    keyword: str = "EXIT"
    recognized: bool = True
    raw: str = ""
    tag: ClassVar[str] = "exit"


Command = Union[Type, Select, MoveCursor, Copy, Paste, Exit]

__all__ = ["Type", "Select", "MoveCursor", "Copy", "Paste", "Exit", "Command"]
