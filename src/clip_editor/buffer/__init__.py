"""Buffer data model: text storage, cursor/selection state, clipboard."""

from .buffer import BufferDelta, BufferView, EditorBuffer, Transaction
from .clipboard import ClipboardHistory
from .state import BufferState, Selection
from .text import TextStore
from .validation import clamp_offset, ensure_range, ensure_state

__all__ = [
    "EditorBuffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "ClipboardHistory",
    "BufferState",
    "Selection",
    "TextStore",
    "clamp_offset",
    "ensure_range",
    "ensure_state",
]
