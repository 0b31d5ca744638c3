from __future__ import annotations

from linepad.dispatch import KeyResult
from linepad.keymaps import Action, Binding, KeymapRegistry, KeymapResolver


def make_action(action_id: str) -> Action:
    return Action(id=action_id, handler=lambda context: KeyResult(consumed=True))


def test_resolver_returns_bound_action() -> None:
    registry = KeymapRegistry()
    action = registry.register_action(make_action("core.x"))
    registry.bind(Binding("F2", "core.x"))

    assert KeymapResolver(registry).resolve("F2") is action


def test_resolver_misses_unbound_keys() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.x"))
    registry.bind(Binding("F2", "core.x"))
    resolver = KeymapResolver(registry)

    assert resolver.resolve("F3") is None
    assert resolver.resolve("f2") is None


def test_resolver_table_follows_registry_revision() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.x"))
    registry.register_action(make_action("core.y"))
    resolver = KeymapResolver(registry)

    assert resolver.resolve("x") is None

    registry.bind(Binding("x", "core.x"))
    assert resolver.resolve("x").id == "core.x"

    registry.bind(Binding("x", "core.y"), replace=True)
    assert resolver.resolve("x").id == "core.y"
