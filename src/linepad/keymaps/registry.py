"""Keymap registry: the editor's actions and which key triggers each."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from linepad.runtime.telemetry import span

from .models import Action, Binding


class KeymapConflictError(RuntimeError):
    """A binding targets a key that already runs a different action."""

    def __init__(self, binding: Binding, conflict: Binding):
        super().__init__(
            f"Key '{binding.key}' is bound to '{conflict.action_id}' "
            f"({conflict.source}); cannot bind it to '{binding.action_id}'"
        )
        self.binding = binding
        self.conflict = conflict


class KeymapRegistry:
    """Owns the action table and the key -> binding table.

    ``revision`` increases whenever a binding changes so resolvers can cache
    their lookup table.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, Action] = {}
        self._bindings: Dict[str, Binding] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> Action:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def binding_for(self, key: str) -> Optional[Binding]:
        return self._bindings.get(key)

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def register_action(self, action: Action) -> Action:
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def bind(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Bind ``binding.key``; rebinding a key needs ``replace=True``."""

        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": binding.key, "action_id": binding.action_id},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Key '{binding.key}' references unknown action '{binding.action_id}'"
                )

            existing = self._bindings.get(binding.key)
            if existing is not None and existing != binding and not replace:
                handle.add_metadata("conflict", existing.action_id)
                raise KeymapConflictError(binding, existing)

            self._bindings[binding.key] = binding
            self._revision += 1
            return binding


__all__ = ["KeymapRegistry", "KeymapConflictError"]
