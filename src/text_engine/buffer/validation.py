"""Bounds checks shared across buffer services."""

from __future__ import annotations

from .document import LineDocument
from .errors import InvalidArgumentError, OutOfBoundsError
from .position import Position, Range


def ensure_position(document: LineDocument, position: Position) -> Position:
    if not isinstance(position, Position):
        raise InvalidArgumentError(f"Expected a Position, got {position!r}")
    if position.line >= document.line_count:
        raise OutOfBoundsError("Line out of range", position=position)
    if position.column > len(document.get_line(position.line)):
        raise OutOfBoundsError("Column out of range", position=position)
    return position


def ensure_range(document: LineDocument, selection: Range) -> Range:
    if not isinstance(selection, Range):
        raise InvalidArgumentError(f"Expected a Range, got {selection!r}")
    ensure_position(document, selection.start)
    ensure_position(document, selection.end)
    return selection


def ensure_line_span(document: LineDocument, start: int, end: int) -> None:
    document.check_span(start, end)
