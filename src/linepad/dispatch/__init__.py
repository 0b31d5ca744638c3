"""Key events and their dispatch onto the buffer."""

from .dispatcher import InputDispatcher, insertable_text
from .events import EditorContext, EventBus, KeyInput, KeyResult

__all__ = [
    "InputDispatcher",
    "insertable_text",
    "EditorContext",
    "EventBus",
    "KeyInput",
    "KeyResult",
]
