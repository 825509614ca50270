"""Editor buffer façade combining text storage, cursor state, and clipboard."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from clip_editor.runtime import telemetry

from .clipboard import ClipboardHistory
from .state import BufferState, Selection
from .text import TextStore
from .validation import clamp_offset, ensure_range, ensure_state


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    text: Optional[str]
    cursor: int
    selection: Optional[Selection]
    clipboard: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BufferDelta:
    version: int
    text: Optional[str]
    cursor: int
    selection: Optional[Selection]
    label: str
    changed: bool


class EditorBuffer:
    """Single editable text with cursor, selection, and clipboard history.

    ``store`` stays ``None`` until the first ``type_text`` call so an unset
    buffer can be told apart from an empty one.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        store: Optional[TextStore] = None,
        state: Optional[BufferState] = None,
        clipboard: Optional[ClipboardHistory] = None,
    ) -> None:
        self.name = name
        self.store = store
        self.state = state or BufferState()
        self.clipboard = clipboard if clipboard is not None else ClipboardHistory()
        ensure_state(self.store, self.state)

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "EditorBuffer":
        store = TextStore.from_text(text)
        return cls(name=name, store=store, state=BufferState(cursor=len(store)))

    @property
    def text(self) -> Optional[str]:
        return self.store.snapshot() if self.store is not None else None

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def selection(self) -> Optional[Selection]:
        return self.state.selection

    @property
    def version(self) -> int:
        return self.store.version if self.store is not None else 0

    def __len__(self) -> int:
        return len(self.store) if self.store is not None else 0

    def render(self) -> Optional[str]:
        return self.text

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.version,
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            clipboard=self.clipboard.serialize(),
        )

    def type_text(self, payload: str) -> BufferDelta:
        with Transaction(self, "type_text") as tx:
            if self.store is None:
                self.store = TextStore.from_text(payload)
                self.state.set_cursor(len(payload))
            else:
                self._delete_selection()
                self._splice(payload)
            tx.mark_changed()
        return tx.delta()

    def delete_selected(self) -> Optional[str]:
        """Remove the active selection, returning its text (``None`` if none)."""

        if self.state.selection is None:
            return None
        with Transaction(self, "delete_selected") as tx:
            removed = self._delete_selection()
            tx.mark_changed()
        return removed

    def select(self, start: int, end: int) -> BufferDelta:
        with Transaction(self, "select") as tx:
            start, end = ensure_range(self.store, start, end)
            assert self.store is not None
            self.state.set_selection(start, end, self.store.slice(start, end))
            self.state.set_cursor(end + 1)
            tx.mark_changed()
        return tx.delta()

    def move_cursor(self, offset: int) -> BufferDelta:
        with Transaction(self, "move_cursor") as tx:
            self.state.set_cursor(clamp_offset(self.state.cursor + offset, len(self)))
            self.state.clear_selection()
            tx.mark_changed()
        return tx.delta()

    def copy(self) -> BufferDelta:
        with Transaction(self, "copy") as tx:
            selection = self.state.selection
            if selection is not None:
                self.clipboard.push(selection.text)
                tx.mark_changed()
        return tx.delta()

    def paste(self, steps_back: Optional[int] = None) -> BufferDelta:
        """Insert a clipboard entry at the cursor.

        ``steps_back=None`` pastes the latest entry; ``N`` pastes the entry
        ``N`` back from the latest. An empty clipboard or an ``N`` outside
        ``[1, len(clipboard)]`` leaves the buffer untouched.
        """

        with Transaction(self, "paste") as tx:
            if steps_back is None:
                entry = self.clipboard.latest()
            else:
                entry = self.clipboard.steps_back(steps_back)
            if entry is not None and self.store is not None:
                self._delete_selection()
                self._splice(entry)
                tx.mark_changed()
        return tx.delta()

    def _delete_selection(self) -> Optional[str]:
        selection = self.state.selection
        if selection is None or self.store is None:
            return None
        removed = self.store.remove(selection.start, selection.end)
        self.state.set_cursor(selection.start)
        self.state.clear_selection()
        return removed

    def _splice(self, payload: str) -> None:
        assert self.store is not None
        self.state.set_cursor(self.store.insert(self.state.cursor, payload))


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer operation in a telemetry span and checks invariants."""

    def __init__(self, buffer: EditorBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.changed = False
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "cursor": self.buffer.cursor},
        )
        self._span_cm.__enter__()
        return self

    def mark_changed(self) -> None:
        self.changed = True

    def delta(self) -> BufferDelta:
        return BufferDelta(
            version=self.buffer.version,
            text=self.buffer.text,
            cursor=self.buffer.cursor,
            selection=self.buffer.selection,
            label=self.label,
            changed=self.changed,
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            try:
                ensure_state(self.buffer.store, self.buffer.state)
            except Exception as error:
                self._close_span(type(error), error, error.__traceback__)
                raise
        self._close_span(exc_type, exc, tb)
        return False

    def _close_span(self, exc_type, exc, tb) -> None:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
            self._span_cm = None
