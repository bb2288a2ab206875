"""Editor commands built on the buffer and clipboard."""

from .core import ActionResult, EditContext
from .editing import (
    backspace,
    copy_selection,
    cut_selection,
    delete_forward,
    move_down,
    move_left,
    move_right,
    move_up,
    paste,
    paste_and_pop,
    type_character,
)

__all__ = [
    "ActionResult",
    "EditContext",
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
