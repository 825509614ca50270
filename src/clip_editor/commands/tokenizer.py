"""Extract quoted command strings from an input line."""

from __future__ import annotations

from typing import List

QUOTE = '"'


def split_batch(line: str) -> List[str]:
    """Return the quoted segments of ``line`` in order.

    Text outside quotes is discarded, as are empty ``""`` segments. An
    unterminated final quote still yields its segment.
    """

    segments = line.rstrip("\r\n").split(QUOTE)
    return [segment for segment in segments[1::2] if segment]


__all__ = ["QUOTE", "split_batch"]
