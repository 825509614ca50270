"""Classify raw command strings into tagged commands."""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

from clip_editor.runtime import telemetry

from .models import Command, Copy, Exit, MoveCursor, Paste, Select, Type

KeywordHandler = Callable[["CommandParser", str, str], Command]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: Optional[str]) -> int:
    """Parse the leading signed integer of ``text``; anything else is ``0``."""

    if not text:
        return 0
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def split_keyword(raw: str) -> tuple[str, str]:
    """Return ``(keyword, rest)`` split at the first space."""

    keyword, _, rest = raw.partition(" ")
    return keyword, rest


class CommandParser:
    """Maps the leading keyword of a command string to a command value.

    Unknown keywords produce ``Exit(recognized=False)`` rather than an error.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name or "clip_editor.commands"

    @property
    def keywords(self) -> tuple[str, ...]:
        return tuple(_KEYWORD_HANDLERS)

    def parse(self, raw: str) -> Command:
        keyword, rest = split_keyword(raw)
        handler = _KEYWORD_HANDLERS.get(keyword)
        if handler is None:
            return Exit(keyword=keyword, recognized=False, raw=raw)
        return handler(self, raw, rest)

    def operands(self, raw: str, rest: str, count: int) -> List[int]:
        tokens = rest.split()
        values = []
        for index in range(count):
            token = tokens[index] if index < len(tokens) else None
            value = parse_int(token)
            if token is None or str(value) != token.lstrip("+"):
                telemetry.log_with(
                    "debug",
                    "command::operand_coerced",
                    {"raw": raw, "index": index, "token": token, "value": value},
                    logger_name=self._logger_name,
                )
            values.append(value)
        return values


def _parse_type(parser: CommandParser, raw: str, rest: str) -> Command:
    del parser, raw
    return Type(payload=rest)


def _parse_select(parser: CommandParser, raw: str, rest: str) -> Command:
    start, end = parser.operands(raw, rest, 2)
    return Select(start=start, end=end)


def _parse_move(parser: CommandParser, raw: str, rest: str) -> Command:
    (offset,) = parser.operands(raw, rest, 1)
    return MoveCursor(offset=offset)


def _parse_copy(parser: CommandParser, raw: str, rest: str) -> Command:
    del parser, raw, rest
    return Copy()


def _parse_paste(parser: CommandParser, raw: str, rest: str) -> Command:
    if not rest.split():
        return Paste()
    (steps_back,) = parser.operands(raw, rest, 1)
    return Paste(steps_back=steps_back)


def _parse_exit(parser: CommandParser, raw: str, rest: str) -> Command:
    del parser, rest
    keyword, _ = split_keyword(raw)
    return Exit(keyword=keyword, recognized=True, raw=raw)


_KEYWORD_HANDLERS: Dict[str, KeywordHandler] = {
    "TYPE": _parse_type,
    "SELECT": _parse_select,
    "MOVE_CURSOR": _parse_move,
    "COPY": _parse_copy,
    "PASTE": _parse_paste,
    "EXIT": _parse_exit,
    "QUIT": _parse_exit,
}


__all__ = ["CommandParser", "parse_int", "split_keyword"]
