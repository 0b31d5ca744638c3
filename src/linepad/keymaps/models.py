"""Actions and the single-key bindings that reach them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from linepad.dispatch.events import EditorContext, KeyResult

Handler = Callable[["EditorContext"], "KeyResult"]


@dataclass(frozen=True, slots=True)
class Action:
    """Named editor verb. Calling it runs the handler against a context."""

    id: str
    handler: Handler
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Action id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, context: "EditorContext") -> "KeyResult":
        return self.handler(context)


@dataclass(frozen=True, slots=True)
class Binding:
    """Key token (``"UP"``, ``"ESC"``...) mapped to an action id."""

    key: str
    action_id: str
    source: str = "user"

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


__all__ = ["Action", "Binding", "Handler"]
