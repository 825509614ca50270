"""Validation helpers guarding the buffer invariants."""

from __future__ import annotations

from typing import Optional, Tuple

from clip_editor.errors import BufferValidationError, InvalidRange

from .state import BufferState
from .text import TextStore


def clamp_offset(offset: int, length: int) -> int:
    return max(0, min(offset, length))


def ensure_range(store: Optional[TextStore], start: int, end: int) -> Tuple[int, int]:
    """Return ``(start, end)`` when it is a valid inclusive range of ``store``."""

    length = len(store) if store is not None else 0
    if store is None or not 0 <= start <= end < length:
        raise InvalidRange(start, end, length)
    return start, end


def ensure_state(store: Optional[TextStore], state: BufferState) -> BufferState:
    length = len(store) if store is not None else 0
    if not 0 <= state.cursor <= length:
        raise BufferValidationError("Cursor out of range", offset=state.cursor)
    selection = state.selection
    if selection is not None:
        ensure_range(store, selection.start, selection.end)
    return state
