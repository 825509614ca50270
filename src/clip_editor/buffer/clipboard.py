"""Append-only clipboard history."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple


class ClipboardHistory:
    """Copied snippets in copy order; the last entry is the most recent.

    Entries are never changed or removed once pushed.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def is_empty(self) -> bool:
        return not self._entries

    def push(self, text: str) -> int:
        self._entries.append(text)
        return len(self._entries)

    def latest(self) -> Optional[str]:
        return self._entries[-1] if self._entries else None

    def steps_back(self, steps: int) -> Optional[str]:
        """Return the entry ``steps`` back from the end, ``1`` being the latest."""

        if steps < 1 or steps > len(self._entries):
            return None
        return self._entries[len(self._entries) - steps]

    def serialize(self) -> Tuple[str, ...]:
        return tuple(self._entries)
