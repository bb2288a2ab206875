"""Observer contracts and the fan-out list shared by buffer and clipboard."""

from __future__ import annotations

from contextlib import suppress
from typing import Callable, Generic, Iterator, List, Protocol, TypeVar

from .errors import InvalidArgumentError
from .position import Position


class CursorObserver(Protocol):
    """Notified after the cursor moves without a text change."""

    def update_cursor_location(self, position: Position) -> None:
        ...


class TextObserver(Protocol):
    """Notified after the buffer text changes; re-query the buffer for state."""

    def update_text(self) -> None:
        ...


class ClipboardObserver(Protocol):
    """Notified after the clipboard stack changes."""

    def update_clipboard(self) -> None:
        ...


T = TypeVar("T")


class ObserverList(Generic[T]):
    """Registration-ordered observer handles with synchronous delivery."""

    def __init__(self) -> None:
        self._observers: List[T] = []

    def add(self, observer: T) -> None:
        if observer is None:
            raise InvalidArgumentError("Observer must not be None")
        self._observers.append(observer)

    def remove(self, observer: T) -> None:
        with suppress(ValueError):
            self._observers.remove(observer)

    def notify(self, deliver: Callable[[T], None]) -> None:
        # Snapshot so observers may unsubscribe while being notified.
        for observer in tuple(self._observers):
            deliver(observer)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._observers))

    def __len__(self) -> int:
        return len(self._observers)


__all__ = [
    "CursorObserver",
    "TextObserver",
    "ClipboardObserver",
    "ObserverList",
]
