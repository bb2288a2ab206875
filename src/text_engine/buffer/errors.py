"""Error kinds raised by buffer and clipboard operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .position import Position


class TextEngineError(RuntimeError):
    """Base class for contract violations reported by the engine."""

    def __init__(self, message: str, *, position: "Position | None" = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidArgumentError(TextEngineError, ValueError):
    """Raised when a required argument is missing or malformed."""


class EmptyStackError(TextEngineError, LookupError):
    """Raised when reading from an empty clipboard."""


class OutOfBoundsError(TextEngineError, IndexError):
    """Raised when a position or line span falls outside the document."""


__all__ = [
    "TextEngineError",
    "InvalidArgumentError",
    "EmptyStackError",
    "OutOfBoundsError",
]
