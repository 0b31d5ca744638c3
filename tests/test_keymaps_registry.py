import pytest

from linepad.dispatch import KeyResult
from linepad.keymaps import Action, Binding, KeymapConflictError, KeymapRegistry
from linepad.keymaps.defaults import DEFAULT_ACTIONS, load_default_keymaps


def make_action(action_id: str = "core.test") -> Action:
    return Action(id=action_id, handler=lambda context: KeyResult(consumed=True))


def make_registry(*action_ids: str) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in action_ids or ("core.test",):
        registry.register_action(make_action(action_id))
    return registry


def test_bind_records_binding_and_bumps_revision() -> None:
    registry = make_registry()
    before = registry.revision()

    binding = registry.bind(Binding("F1", "core.test"))

    assert registry.binding_for("F1") == binding
    assert list(registry.iter_bindings()) == [binding]
    assert registry.revision() == before + 1


def test_bind_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.bind(Binding("F1", "core.missing"))


def test_rebinding_a_key_is_a_conflict() -> None:
    registry = make_registry("core.a", "core.b")
    registry.bind(Binding("F1", "core.a"))

    with pytest.raises(KeymapConflictError) as info:
        registry.bind(Binding("F1", "core.b"))

    assert info.value.conflict.action_id == "core.a"
    assert registry.binding_for("F1").action_id == "core.a"


def test_rebinding_with_replace() -> None:
    registry = make_registry("core.a", "core.b")
    registry.bind(Binding("F1", "core.a"))

    registry.bind(Binding("F1", "core.b"), replace=True)

    assert [b.action_id for b in registry.iter_bindings()] == ["core.b"]


def test_duplicate_action_rejected() -> None:
    registry = make_registry()

    with pytest.raises(ValueError):
        registry.register_action(make_action())


def test_action_and_binding_validation() -> None:
    with pytest.raises(ValueError):
        Action(id="", handler=lambda context: None)
    with pytest.raises(TypeError):
        Action(id="core.x", handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Binding("", "core.x")


def test_load_default_keymaps_binds_every_key() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    table = {b.key: b.action_id for b in registry.iter_bindings()}
    assert table == {
        "UP": "cursor.up",
        "DOWN": "cursor.down",
        "LEFT": "cursor.left",
        "RIGHT": "cursor.right",
        "DELETE": "edit.delete_next",
        "BACKSPACE": "edit.delete_prev",
        "ENTER": "edit.insert_newline",
        "TAB": "edit.insert_tab",
        "ESC": "session.quit",
    }
    assert all(b.source == "defaults" for b in registry.iter_bindings())
    # every built-in action is reachable from a key
    assert {action.id for action in DEFAULT_ACTIONS} == set(table.values())
