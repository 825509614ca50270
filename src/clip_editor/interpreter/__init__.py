"""Interpreter loop and its event bus."""

from .bus import EventBus
from .interpreter import BatchResult, Interpreter

__all__ = ["BatchResult", "EventBus", "Interpreter"]
