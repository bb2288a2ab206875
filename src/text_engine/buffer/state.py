"""Cursor and selection state for a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .position import Position, Range


@dataclass(slots=True)
class BufferState:
    """Holds the cursor and selection; both are replaced, never mutated."""

    cursor: Position = field(default_factory=Position)
    selection: Range = field(default_factory=lambda: Range.empty(Position()))

    def set_cursor(self, position: Position) -> bool:
        """Store ``position`` and report whether the cursor actually moved."""

        if position == self.cursor:
            return False
        self.cursor = position
        return True

    def collapse_selection(self) -> None:
        self.selection = Range.empty(self.cursor)

    def set_selection(self, selection: Range) -> None:
        self.selection = selection
