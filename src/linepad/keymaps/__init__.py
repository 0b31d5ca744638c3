"""Keymap registry and resolver.

Built-in bindings live in ``linepad.keymaps.defaults``; that module pulls in
the action implementations and is imported explicitly.
"""

from .models import Action, Binding
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver

__all__ = [
    "Action",
    "Binding",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
]
