"""Line storage for text buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence

from .errors import OutOfBoundsError

LINE_SEPARATOR = "\n"


def split_lines(text: str) -> List[str]:
    """Split ``text`` on the line separator, keeping trailing empty segments."""

    return text.split(LINE_SEPARATOR)


@dataclass(slots=True)
class LineDocument:
    """Ordered list of lines that never drops below a single (possibly empty) line.

    The list is owned by the document; readers get tuples or ``LineSpan`` views.
    ``version`` is advanced by the owner once per completed edit, not per splice.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(_lines=split_lines(text))

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def splice(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace lines ``[start:end]`` with ``new_lines`` in place."""

        replacement = list(new_lines)
        if not replacement and start == 0 and end >= len(self._lines):
            replacement = [""]
        self._lines[start:end] = replacement

    def bump(self) -> int:
        self.version += 1
        return self.version

    def check_span(self, start: int, end: int) -> None:
        count = len(self._lines)
        if not (0 <= start <= end <= count):
            raise OutOfBoundsError(
                f"Invalid line span [{start}, {end}) for {count} line(s)"
            )

    def span(self, start: int, end: int) -> "LineSpan":
        return LineSpan(self, start, end)

    def text(self) -> str:
        return LINE_SEPARATOR.join(self._lines)


class LineSpan:
    """Restartable view over lines ``[start, end)`` of a document.

    Each ``iter()`` call starts from ``start`` again and reads the document as
    it is at that moment; a span that no longer fits raises ``OutOfBoundsError``.
    """

    __slots__ = ("_document", "start", "end")

    def __init__(self, document: LineDocument, start: int, end: int) -> None:
        self._document = document
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[str]:
        self._document.check_span(self.start, self.end)
        lines = self._document.snapshot()
        return iter(lines[self.start : self.end])

    def __len__(self) -> int:
        self._document.check_span(self.start, self.end)
        return self.end - self.start

    def __repr__(self) -> str:
        return f"LineSpan(start={self.start}, end={self.end})"
