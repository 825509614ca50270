"""Command parsing, batch tokenizing, and the pending-command queue."""

from .models import Command, Copy, Exit, MoveCursor, Paste, Select, Type
from .parser import CommandParser, parse_int, split_keyword
from .queue import CommandQueue
from .tokenizer import split_batch

__all__ = [
    "Command",
    "Copy",
    "Exit",
    "MoveCursor",
    "Paste",
    "Select",
    "Type",
    "CommandParser",
    "CommandQueue",
    "parse_int",
    "split_batch",
    "split_keyword",
]
