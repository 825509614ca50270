"""Owned text storage with bounds-checked splice primitives."""

from __future__ import annotations

from dataclasses import dataclass

from clip_editor.errors import BufferValidationError


@dataclass(slots=True)
class TextStore:
    """Mutable text content addressed by 0-based offsets.

    ``insert`` and ``remove`` are the only ways to change the content; both
    validate their offsets before touching anything and bump ``version``.
    """

    _text: str = ""
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextStore":
        return cls(_text=str(text), version=0)

    def snapshot(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def insert(self, offset: int, text: str) -> int:
        """Insert ``text`` before ``offset`` and return the offset after it."""

        self._check_offset(offset, upper=len(self._text))
        if text:
            self._text = self._text[:offset] + text + self._text[offset:]
            self.version += 1
        return offset + len(text)

    def remove(self, start: int, end: int) -> str:
        """Remove the inclusive range ``[start, end]`` and return it."""

        removed = self.slice(start, end)
        self._text = self._text[:start] + self._text[end + 1 :]
        self.version += 1
        return removed

    def slice(self, start: int, end: int) -> str:
        """Return the inclusive range ``[start, end]``."""

        last = len(self._text) - 1
        self._check_offset(start, upper=last)
        self._check_offset(end, upper=last)
        if start > end:
            raise BufferValidationError(
                f"Range start {start} is after end {end}", offset=start
            )
        return self._text[start : end + 1]

    @staticmethod
    def _check_offset(offset: int, *, upper: int) -> None:
        if offset < 0 or offset > upper:
            raise BufferValidationError(
                f"Offset {offset} out of range [0, {upper}]", offset=offset
            )
