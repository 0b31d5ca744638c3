"""Pure cursor positioning over a line store.

Every helper takes the store and a cursor and returns a new cursor; nothing
here mutates. Moves that would leave the buffer are no-ops.
"""

from __future__ import annotations

from enum import Enum

from .document import LineStore
from .state import Cursor


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def clamp_col(store: LineStore, cursor: Cursor) -> Cursor:
    row, col = cursor
    return (row, min(col, len(store.line_at(row))))


def move_up(store: LineStore, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row == 0:
        return cursor
    return clamp_col(store, (row - 1, col))


def move_down(store: LineStore, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row >= store.line_count - 1:
        return cursor
    return clamp_col(store, (row + 1, col))


def move_left(store: LineStore, cursor: Cursor) -> Cursor:
    row, col = cursor
    if col > 0:
        return (row, col - 1)
    if row > 0:
        return (row - 1, len(store.line_at(row - 1)))
    return cursor


def move_right(store: LineStore, cursor: Cursor) -> Cursor:
    row, col = cursor
    if col < len(store.line_at(row)):
        return (row, col + 1)
    if row < store.line_count - 1:
        return (row + 1, 0)
    return cursor


_MOVES = {
    Direction.UP: move_up,
    Direction.DOWN: move_down,
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
}


def move(store: LineStore, cursor: Cursor, direction: Direction) -> Cursor:
    return _MOVES[Direction(direction)](store, cursor)


def at_buffer_start(cursor: Cursor) -> bool:
    return cursor == (0, 0)


def at_buffer_end(store: LineStore, cursor: Cursor) -> bool:
    last = store.line_count - 1
    return cursor == (last, len(store.line_at(last)))


__all__ = [
    "Direction",
    "clamp_col",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "move",
    "at_buffer_start",
    "at_buffer_end",
]
