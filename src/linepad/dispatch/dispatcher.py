"""Route each key to a bound action, a character insert, or nowhere."""

from __future__ import annotations

from linepad.buffer import is_insertable
from linepad.keymaps.models import Action
from linepad.keymaps.resolver import KeymapResolver
from linepad.runtime import telemetry

from .events import EditorContext, KeyInput, KeyResult

TAB = "\t"


def insertable_text(key: KeyInput) -> str | None:
    # Tab only arrives through its binding.
    if key.text is not None and key.text != TAB and is_insertable(key.text):
        return key.text
    return None


class InputDispatcher:
    """Applies one key to the context's buffer.

    Bound keys run their action. Unbound keys carrying a printable
    character are inserted. Everything else is ignored without touching
    the buffer.
    """

    def __init__(self, context: EditorContext, resolver: KeymapResolver) -> None:
        self.context = context
        self.resolver = resolver

    def handle_key(self, key: KeyInput) -> KeyResult:
        action = self.resolver.resolve(key.key)
        if action is not None:
            return self._run(action, key)

        text = insertable_text(key)
        if text is None:
            telemetry.record_event("keys.ignored", level="debug", data={"key": key.key})
            return KeyResult(consumed=False, status="ignored")

        delta = self.context.buffer.insert_char(text)
        self.context.bus.emit("buffer.changed", delta)
        return KeyResult(consumed=True, message=delta.label)

    def _run(self, action: Action, key: KeyInput) -> KeyResult:
        with telemetry.span(
            "dispatch::action",
            component="dispatch",
            metadata={"key": key.key, "action": action.id},
        ):
            return action(self.context)


__all__ = ["InputDispatcher", "insertable_text"]
