"""UI-agnostic text buffer engine."""

__all__ = [
    "actions",
    "buffer",
    "runtime",
]

__version__ = "0.1.0"
