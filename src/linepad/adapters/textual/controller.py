"""Minimal Textual adapter that wires an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from linepad.dispatch import KeyInput, KeyResult
from linepad.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names -> keymap tokens
TEXTUAL_KEYS: Dict[str, str] = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "delete": "DELETE",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "enter": "ENTER",
    "return": "ENTER",
    "tab": "TAB",
    "escape": "ESC",
}


def normalize_textual_key(key: str, character: Optional[str] = None) -> KeyInput:
    token = TEXTUAL_KEYS.get(key)
    if token is not None:
        return KeyInput(key=token)
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(key=character, text=character)
    return KeyInput(key=key.upper())


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[List[str]], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds Textual key events to a session and pushes frames back out."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.session.bus.subscribe(
            "session.quit", lambda payload: self._handle_event("session.quit", payload)
        )
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> KeyResult:
        """Translate a Textual key into a KeyInput and dispatch it."""

        normalized = normalize_textual_key(key, character)
        self._log_state("key ->", key=key, token=normalized.key)
        result = self.session.handle_key(normalized)
        self.hooks.update_status(result.message or result.status)
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def resize(self, height: int) -> None:
        self.session.resize(max(height, 1))
        self.refresh()

    def refresh(self) -> None:
        self.hooks.update_frame(self.session.frame())

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        row, col = self.session.buffer.cursor
        snapshot: Dict[str, object] = {
            "cursor": f"{row}:{col}",
            "top_row": self.session.viewport.top_row,
            "version": self.session.buffer.store.version,
            "state": self.session.state.value,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_textual_key"]
