"""Key events, dispatch results and the context actions run against."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from linepad.buffer import Buffer


@dataclass(frozen=True, slots=True)
class KeyInput:
    """One decoded key.

    ``key`` is the binding token (``"UP"``, ``"ESC"``, ``"a"``...). ``text``
    carries the character a printable key would insert.
    """

    key: str
    text: Optional[str] = None


@dataclass(slots=True)
class KeyResult:
    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    stop: bool = False


class EventBus:
    """Synchronous publish/subscribe between actions and hosts."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, ())):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    buffer: Buffer
    bus: EventBus = field(default_factory=EventBus)


__all__ = ["KeyInput", "KeyResult", "EventBus", "EditorContext"]
