"""Immutable coordinates used for the cursor and the selection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Optional

from .errors import InvalidArgumentError


def _check_coordinate(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} cannot be negative, got {value}")


@total_ordering
@dataclass(frozen=True, slots=True)
class Position:
    """A ``(column, line)`` coordinate, ordered by line first."""

    column: int = 0
    line: int = 0

    def __post_init__(self) -> None:
        _check_coordinate("column", self.column)
        _check_coordinate("line", self.line)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.line, self.column) < (other.line, other.column)

    def moved(
        self, *, column: Optional[int] = None, line: Optional[int] = None
    ) -> "Position":
        changes = {}
        if column is not None:
            changes["column"] = column
        if line is not None:
            changes["line"] = line
        return replace(self, **changes)

    def __str__(self) -> str:
        return f"({self.column}, {self.line})"


@dataclass(frozen=True, slots=True)
class Range:
    """Pair of positions; ``start`` may sort after ``end`` for backward selections."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if not isinstance(self.start, Position) or not isinstance(self.end, Position):
            raise InvalidArgumentError("Range endpoints must be Position values")

    @classmethod
    def empty(cls, at: Position) -> "Range":
        return cls(at, at)

    @property
    def is_defined(self) -> bool:
        return self.start != self.end

    def normalized(self) -> "Range":
        if self.start <= self.end:
            return self
        return Range(self.end, self.start)

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"


__all__ = ["Position", "Range"]
