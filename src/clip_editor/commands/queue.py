"""FIFO queue of pending command strings."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator

from clip_editor.errors import EmptyQueueError


class CommandQueue:
    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._items: Deque[str] = deque(commands)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def enqueue(self, command: str) -> None:
        self._items.append(command)

    def extend(self, commands: Iterable[str]) -> None:
        self._items.extend(commands)

    def dequeue(self) -> str:
        if not self._items:
            raise EmptyQueueError("dequeue from an empty command queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()


__all__ = ["CommandQueue"]
