"""Editing verbs bound by the default keymap."""

from .core import quit_session
from .edit import (
    cursor_down,
    cursor_left,
    cursor_right,
    cursor_up,
    delete_next,
    delete_prev,
    insert_newline,
    insert_tab,
)

__all__ = [
    "quit_session",
    "insert_newline",
    "insert_tab",
    "delete_prev",
    "delete_next",
    "cursor_up",
    "cursor_down",
    "cursor_left",
    "cursor_right",
]
