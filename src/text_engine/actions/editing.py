"""Editor commands composed from buffer and clipboard operations.

An input layer maps key presses onto these; each takes an ``EditContext``
and returns an ``ActionResult``.
"""

from __future__ import annotations

from typing import Callable

from text_engine.buffer import Range, TextBuffer
from text_engine.runtime.telemetry import span

from .core import ActionResult, EditContext


def _settle_selection(buffer: TextBuffer, anchor_range: Range, *, extend: bool) -> None:
    if extend:
        buffer.set_selection(Range(anchor_range.start, buffer.cursor))
    else:
        buffer.set_selection(Range.empty(buffer.cursor))


def _motion(
    context: EditContext, step: Callable[[TextBuffer], bool], *, extend: bool
) -> ActionResult:
    buffer = context.buffer
    before = buffer.selection
    moved = step(buffer)
    _settle_selection(buffer, before, extend=extend)
    if extend:
        return ActionResult(consumed=True, status="select")
    return ActionResult(consumed=True, status="move" if moved else "noop")


def move_left(context: EditContext, *, extend: bool = False) -> ActionResult:
    return _motion(context, TextBuffer.move_left, extend=extend)


def move_right(context: EditContext, *, extend: bool = False) -> ActionResult:
    return _motion(context, TextBuffer.move_right, extend=extend)


def move_up(context: EditContext, *, extend: bool = False) -> ActionResult:
    return _motion(context, TextBuffer.move_up, extend=extend)


def move_down(context: EditContext, *, extend: bool = False) -> ActionResult:
    return _motion(context, TextBuffer.move_down, extend=extend)


def backspace(context: EditContext) -> ActionResult:
    buffer = context.buffer
    if buffer.selection.is_defined:
        buffer.delete_range(buffer.selection)
        return ActionResult(consumed=True, status="delete_selection")
    if buffer.delete_before():
        return ActionResult(consumed=True, status="delete")
    return ActionResult(consumed=True, status="noop")


def delete_forward(context: EditContext) -> ActionResult:
    buffer = context.buffer
    if buffer.selection.is_defined:
        buffer.delete_range(buffer.selection)
        return ActionResult(consumed=True, status="delete_selection")
    if buffer.delete_after():
        return ActionResult(consumed=True, status="delete")
    return ActionResult(consumed=True, status="noop")


def type_character(context: EditContext, char: str) -> ActionResult:
    context.buffer.insert_char(char)
    return ActionResult(consumed=True, status="insert")


def copy_selection(context: EditContext) -> ActionResult:
    return _yank(context, cut=False)


def cut_selection(context: EditContext) -> ActionResult:
    return _yank(context, cut=True)


def _yank(context: EditContext, *, cut: bool) -> ActionResult:
    buffer = context.buffer
    selection = buffer.selection
    if not selection.is_defined:
        return ActionResult(consumed=False, status="no_selection")
    label = "cut" if cut else "copy"
    with span(
        f"clipboard::{label}",
        component="clipboard",
        metadata={"buffer": buffer.name, "range": str(selection)},
    ) as handle:
        text = buffer.get_text_range(selection)
        context.clipboard.push(text)
        handle.add_metadata("length", len(text))
        if cut:
            buffer.delete_range(selection)
    return ActionResult(consumed=True, status=label, message=text)


def paste(context: EditContext) -> ActionResult:
    return _paste(context, pop=False)


def paste_and_pop(context: EditContext) -> ActionResult:
    return _paste(context, pop=True)


def _paste(context: EditContext, *, pop: bool) -> ActionResult:
    clipboard = context.clipboard
    if clipboard.is_empty():
        return ActionResult(consumed=False, status="clipboard_empty")
    label = "paste_pop" if pop else "paste"
    with span(
        f"clipboard::{label}",
        component="clipboard",
        metadata={"buffer": context.buffer.name, "depth": len(clipboard)},
    ):
        text = clipboard.pop() if pop else clipboard.peek()
        context.buffer.insert_text(text)
    return ActionResult(consumed=True, status=label, message=text)


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "backspace",
    "delete_forward",
    "type_character",
    "copy_selection",
    "cut_selection",
    "paste",
    "paste_and_pop",
]
