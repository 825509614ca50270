"""Command-driven in-memory text buffer editor."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "interpreter",
    "runtime",
    "session",
]

__version__ = "0.1.0"
