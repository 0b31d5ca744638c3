"""Built-in actions and the key bindings every session starts with."""

from __future__ import annotations

from linepad.actions import core as core_actions
from linepad.actions import edit as edit_actions

from .models import Action, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[Action, ...] = (
    Action("cursor.up", edit_actions.cursor_up, "Move up"),
    Action("cursor.down", edit_actions.cursor_down, "Move down"),
    Action("cursor.left", edit_actions.cursor_left, "Move left"),
    Action("cursor.right", edit_actions.cursor_right, "Move right"),
    Action(
        "edit.delete_next",
        edit_actions.delete_next,
        "Delete the character under the cursor",
    ),
    Action(
        "edit.delete_prev",
        edit_actions.delete_prev,
        "Delete the character before the cursor",
    ),
    Action(
        "edit.insert_newline",
        edit_actions.insert_newline,
        "Split the line at the cursor",
    ),
    Action("edit.insert_tab", edit_actions.insert_tab, "Insert a tab character"),
    Action("session.quit", core_actions.quit_session, "Save and leave the editor"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(key, action_id, source="defaults")
    for key, action_id in (
        ("UP", "cursor.up"),
        ("DOWN", "cursor.down"),
        ("LEFT", "cursor.left"),
        ("RIGHT", "cursor.right"),
        ("DELETE", "edit.delete_next"),
        ("BACKSPACE", "edit.delete_prev"),
        ("ENTER", "edit.insert_newline"),
        ("TAB", "edit.insert_tab"),
        ("ESC", "session.quit"),
    )
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    """Register every built-in action and bind the default keys."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.bind(binding)
    return registry


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
