"""Cursor and selection state for the editor buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Selection:
    """Inclusive ``[start, end]`` range plus the text it covered when made."""

    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start + 1


@dataclass(slots=True)
class BufferState:
    cursor: int = 0
    selection: Optional[Selection] = None

    def set_cursor(self, offset: int) -> None:
        self.cursor = offset

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, start: int, end: int, text: str) -> None:
        self.selection = Selection(start=start, end=end, text=text)
