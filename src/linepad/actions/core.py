"""Session-level actions that never touch the buffer."""

from __future__ import annotations

from linepad.dispatch.events import EditorContext, KeyResult


def quit_session(context: EditorContext) -> KeyResult:
    context.bus.emit("session.quit", context.buffer.name)
    return KeyResult(consumed=True, stop=True, message="quit")


__all__ = ["quit_session"]
