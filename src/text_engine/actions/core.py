"""Shared types for editor commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from text_engine.buffer import ClipboardStack, TextBuffer


@dataclass(slots=True)
class EditContext:
    """Services an editor command operates on."""

    buffer: TextBuffer
    clipboard: ClipboardStack = field(default_factory=ClipboardStack)

    @classmethod
    def from_text(cls, text: str) -> "EditContext":
        return cls(buffer=TextBuffer(text))


@dataclass(slots=True)
class ActionResult:
    """Outcome reported back to the input layer."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


__all__ = ["EditContext", "ActionResult"]
