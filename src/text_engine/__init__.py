"""UI-agnostic text editing engine with snapshot undo and keyword search."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "errors",
    "runtime",
    "search",
    "storage",
]

__version__ = "0.1.0"
