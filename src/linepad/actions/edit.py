"""Actions wrapping the buffer's edit operations."""

from __future__ import annotations

from linepad.buffer import BufferDelta, Direction
from linepad.dispatch.events import EditorContext, KeyResult


def _result(context: EditorContext, delta: BufferDelta) -> KeyResult:
    if delta.changed:
        context.bus.emit("buffer.changed", delta)
        return KeyResult(consumed=True, message=delta.label)
    return KeyResult(consumed=True, status="noop", message=delta.label)


def insert_newline(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.insert_newline())


def insert_tab(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.insert_tab())


def delete_prev(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.delete_prev())


def delete_next(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.delete_next())


def cursor_up(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.move_cursor(Direction.UP))


def cursor_down(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.move_cursor(Direction.DOWN))


def cursor_left(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.move_cursor(Direction.LEFT))


def cursor_right(context: EditorContext) -> KeyResult:
    return _result(context, context.buffer.move_cursor(Direction.RIGHT))


__all__ = [
    "insert_newline",
    "insert_tab",
    "delete_prev",
    "delete_next",
    "cursor_up",
    "cursor_down",
    "cursor_left",
    "cursor_right",
]
