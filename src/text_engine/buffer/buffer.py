"""TextBuffer: line document plus cursor, selection, and change notifications."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Sequence

from text_engine.runtime import telemetry

from .document import LINE_SEPARATOR, LineDocument, LineSpan, split_lines
from .errors import InvalidArgumentError
from .observers import CursorObserver, ObserverList, TextObserver
from .position import Position, Range
from .state import BufferState
from .validation import ensure_line_span, ensure_position, ensure_range


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    lines: Sequence[str]
    cursor: Position
    selection: Range

    @property
    def text(self) -> str:
        return LINE_SEPARATOR.join(self.lines)


class TextBuffer:
    """Editable document with a single cursor and a single selection.

    Motions notify cursor observers when the cursor actually moves. Edits
    notify text observers exactly once, after lines, cursor and selection
    are all consistent again; edits never send a separate cursor
    notification.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
    ) -> None:
        if text is None:
            raise InvalidArgumentError("Initial text must not be None")
        self.name = name
        self.document = LineDocument.from_text(text)
        self.state = BufferState()
        self._cursor_observers: ObserverList[CursorObserver] = ObserverList()
        self._text_observers: ObserverList[TextObserver] = ObserverList()

    # -- read accessors ---------------------------------------------------

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def line(self, index: int) -> str:
        ensure_line_span(self.document, index, index + 1)
        return self.document.get_line(index)

    @property
    def text(self) -> str:
        return self.document.text()

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def cursor(self) -> Position:
        return self.state.cursor

    @property
    def selection(self) -> Range:
        return self.state.selection

    def all_lines(self) -> LineSpan:
        return self.document.span(0, self.document.line_count)

    def lines_range(self, start: int, end: int) -> LineSpan:
        """Lines ``[start, end)``; raises ``OutOfBoundsError`` for a bad span."""

        ensure_line_span(self.document, start, end)
        return self.document.span(start, end)

    def get_text_range(self, selection: Range) -> str:
        ensure_range(self.document, selection)
        start, end = _ordered(selection)
        if start.line == end.line:
            return self.document.get_line(start.line)[start.column : end.column]
        parts = [self.document.get_line(start.line)[start.column :]]
        for index in range(start.line + 1, end.line):
            parts.append(self.document.get_line(index))
        parts.append(self.document.get_line(end.line)[: end.column])
        return LINE_SEPARATOR.join(parts)

    def selected_text(self) -> str:
        return self.get_text_range(self.state.selection)

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
            selection=self.state.selection,
        )

    # -- observers --------------------------------------------------------

    def add_cursor_observer(self, observer: CursorObserver) -> None:
        self._cursor_observers.add(observer)

    def remove_cursor_observer(self, observer: CursorObserver) -> None:
        self._cursor_observers.remove(observer)

    def add_text_observer(self, observer: TextObserver) -> None:
        self._text_observers.add(observer)

    def remove_text_observer(self, observer: TextObserver) -> None:
        self._text_observers.remove(observer)

    def _notify_cursor_observers(self) -> None:
        cursor = self.state.cursor
        self._cursor_observers.notify(lambda obs: obs.update_cursor_location(cursor))

    def _notify_text_observers(self) -> None:
        self._text_observers.notify(lambda obs: obs.update_text())

    # -- cursor motion ----------------------------------------------------

    def move_left(self) -> bool:
        cursor = self.state.cursor
        if cursor.column > 0:
            return self._move(cursor.moved(column=cursor.column - 1))
        if cursor.line == 0:
            return False
        previous = cursor.line - 1
        return self._move(Position(self._line_length(previous), previous))

    def move_right(self) -> bool:
        cursor = self.state.cursor
        if cursor.column < self._line_length(cursor.line):
            return self._move(cursor.moved(column=cursor.column + 1))
        if cursor.line >= self.document.line_count - 1:
            return False
        return self._move(Position(0, cursor.line + 1))

    def move_up(self) -> bool:
        cursor = self.state.cursor
        if cursor.line == 0:
            return False
        return self._move(self._clamped(cursor.column, cursor.line - 1))

    def move_down(self) -> bool:
        cursor = self.state.cursor
        if cursor.line >= self.document.line_count - 1:
            return False
        return self._move(self._clamped(cursor.column, cursor.line + 1))

    def move_to_line_start(self) -> bool:
        return self._move(self.state.cursor.moved(column=0))

    def move_to_line_end(self) -> bool:
        line = self.state.cursor.line
        return self._move(Position(self._line_length(line), line))

    def move_to(self, position: Position) -> bool:
        return self._move(ensure_position(self.document, position))

    def set_selection(self, selection: Range) -> None:
        self.state.set_selection(ensure_range(self.document, selection))

    def _move(self, target: Position) -> bool:
        moved = self.state.set_cursor(target)
        if moved:
            self._notify_cursor_observers()
        return moved

    # -- deletion ---------------------------------------------------------

    def delete_before(self) -> bool:
        cursor = self.state.cursor
        if cursor.line == 0 and cursor.column == 0:
            return False
        with Transaction(self, "delete_before"):
            if cursor.column == 0:
                previous = cursor.line - 1
                join_at = self._line_length(previous)
                merged = self.document.get_line(previous) + self.document.get_line(
                    cursor.line
                )
                self.document.splice(previous, cursor.line + 1, [merged])
                self.state.set_cursor(Position(join_at, previous))
            else:
                current = self.document.get_line(cursor.line)
                updated = current[: cursor.column - 1] + current[cursor.column :]
                self.document.splice(cursor.line, cursor.line + 1, [updated])
                self.state.set_cursor(cursor.moved(column=cursor.column - 1))
            self.state.collapse_selection()
        return True

    def delete_after(self) -> bool:
        cursor = self.state.cursor
        length = self._line_length(cursor.line)
        last_line = cursor.line >= self.document.line_count - 1
        if last_line and cursor.column >= length:
            return False
        with Transaction(self, "delete_after"):
            current = self.document.get_line(cursor.line)
            if cursor.column == length:
                merged = current + self.document.get_line(cursor.line + 1)
                self.document.splice(cursor.line, cursor.line + 2, [merged])
            else:
                updated = current[: cursor.column] + current[cursor.column + 1 :]
                self.document.splice(cursor.line, cursor.line + 1, [updated])
            self.state.collapse_selection()
        return True

    def delete_range(self, selection: Range) -> None:
        """Collapse ``selection`` to its start and leave the cursor there."""

        ensure_range(self.document, selection)
        with Transaction(self, "delete_range"):
            self._collapse_range(selection)

    def _collapse_range(self, selection: Range) -> None:
        start, end = _ordered(selection)
        head = self.document.get_line(start.line)[: start.column]
        tail = self.document.get_line(end.line)[end.column :]
        self.document.splice(start.line, end.line + 1, [head + tail])
        self.state.set_cursor(start)
        self.state.collapse_selection()

    # -- insertion --------------------------------------------------------

    def insert_char(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidArgumentError(
                f"insert_char expects a single character, got {char!r}"
            )
        self._replace_selection_with(char, label="insert_char")

    def insert_text(self, text: str) -> None:
        if not isinstance(text, str):
            raise InvalidArgumentError(f"insert_text expects a str, got {text!r}")
        self._replace_selection_with(text, label="insert_text")

    def _replace_selection_with(self, text: str, *, label: str) -> None:
        with Transaction(self, label) as tx:
            if self.state.selection.is_defined:
                tx.note("replaced_selection", True)
                self._collapse_range(ensure_range(self.document, self.state.selection))
            self._splice_text(text)

    def _splice_text(self, text: str) -> None:
        cursor = self.state.cursor
        current = self.document.get_line(cursor.line)
        head, tail = current[: cursor.column], current[cursor.column :]
        segments = split_lines(text)
        segments[0] = head + segments[0]
        segments[-1] = segments[-1] + tail
        self.document.splice(cursor.line, cursor.line + 1, segments)
        landing = Position(
            len(segments[-1]) - len(tail), cursor.line + len(segments) - 1
        )
        self.state.set_cursor(landing)
        self.state.collapse_selection()

    # -- helpers ----------------------------------------------------------

    def _line_length(self, index: int) -> int:
        return len(self.document.get_line(index))

    def _clamped(self, column: int, line: int) -> Position:
        return Position(min(column, self._line_length(line)), line)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit in a telemetry span and notifies text observers on success."""

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "cursor": str(self.buffer.cursor)},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def note(self, key: str, value: object) -> None:
        if self._handle is not None:
            self._handle.add_metadata(key, value)

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                self.note("version", self.buffer.document.bump())
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        if exc_type is None:
            self.buffer._notify_text_observers()
        return False


def _ordered(selection: Range) -> tuple[Position, Position]:
    normalized = selection.normalized()
    return normalized.start, normalized.end


__all__ = ["BufferView", "TextBuffer", "Transaction"]
