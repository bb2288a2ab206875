"""Clipboard storage: a LIFO stack of text scraps."""

from __future__ import annotations

from typing import List

from text_engine.runtime import telemetry

from .errors import EmptyStackError, InvalidArgumentError
from .observers import ClipboardObserver, ObserverList


class ClipboardStack:
    """Unbounded stack of scraps; copy reads with ``peek``, cut-restore uses ``pop``."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._scraps: List[str] = []
        self._observers: ObserverList[ClipboardObserver] = ObserverList()
        self._logger_name = logger_name

    def push(self, text: str) -> None:
        if text is None:
            raise InvalidArgumentError("Clipboard text must not be None")
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Clipboard text must be a str, got {text!r}")
        self._scraps.append(text)
        self._record("push", length=len(text))
        self._notify_observers()

    def pop(self) -> str:
        if not self._scraps:
            raise EmptyStackError("Clipboard is empty")
        text = self._scraps.pop()
        self._record("pop", length=len(text))
        self._notify_observers()
        return text

    def peek(self) -> str:
        if not self._scraps:
            raise EmptyStackError("Clipboard is empty")
        return self._scraps[-1]

    def clear(self) -> None:
        dropped = len(self._scraps)
        self._scraps.clear()
        self._record("clear", dropped=dropped)
        self._notify_observers()

    def is_empty(self) -> bool:
        return not self._scraps

    def __len__(self) -> int:
        return len(self._scraps)

    def __bool__(self) -> bool:
        return bool(self._scraps)

    def add_clipboard_observer(self, observer: ClipboardObserver) -> None:
        self._observers.add(observer)

    def remove_clipboard_observer(self, observer: ClipboardObserver) -> None:
        self._observers.remove(observer)

    def _notify_observers(self) -> None:
        self._observers.notify(lambda obs: obs.update_clipboard())

    def _record(self, operation: str, **data: object) -> None:
        telemetry.record_event(
            f"clipboard.{operation}",
            level="debug",
            data={"depth": len(self._scraps), **data},
            logger_name=self._logger_name,
        )


__all__ = ["ClipboardStack"]
