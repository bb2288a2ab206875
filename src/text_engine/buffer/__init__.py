"""Text buffer, cursor/selection model, and clipboard stack."""

from .buffer import BufferView, TextBuffer, Transaction
from .clipboard import ClipboardStack
from .document import LINE_SEPARATOR, LineDocument, LineSpan
from .errors import (
    EmptyStackError,
    InvalidArgumentError,
    OutOfBoundsError,
    TextEngineError,
)
from .observers import ClipboardObserver, CursorObserver, ObserverList, TextObserver
from .position import Position, Range
from .state import BufferState
from .validation import ensure_line_span, ensure_position, ensure_range

__all__ = [
    "LINE_SEPARATOR",
    "BufferState",
    "BufferView",
    "ClipboardObserver",
    "ClipboardStack",
    "CursorObserver",
    "EmptyStackError",
    "InvalidArgumentError",
    "LineDocument",
    "LineSpan",
    "ObserverList",
    "OutOfBoundsError",
    "Position",
    "Range",
    "TextBuffer",
    "TextEngineError",
    "TextObserver",
    "Transaction",
    "ensure_line_span",
    "ensure_position",
    "ensure_range",
]
