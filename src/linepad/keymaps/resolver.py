"""Key -> action resolution over a registry snapshot."""

from __future__ import annotations

from typing import Dict, Optional

from linepad.runtime.telemetry import span

from .models import Action
from .registry import KeymapRegistry


class KeymapResolver:
    """Flattens the registry into a key -> action table.

    The table is rebuilt lazily when the registry revision moves, so a
    binding made while the editor runs takes effect on the next key.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self.registry = registry
        self._logger_name = logger_name
        self._table: Dict[str, Action] = {}
        self._revision: Optional[int] = None

    def resolve(self, key: str) -> Optional[Action]:
        return self._ensure_table().get(key)

    def _ensure_table(self) -> Dict[str, Action]:
        revision = self.registry.revision()
        if revision == self._revision:
            return self._table

        with span(
            "keymaps::rebuild",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"revision": revision},
        ) as handle:
            self._table = {
                binding.key: self.registry.get_action(binding.action_id)
                for binding in self.registry.iter_bindings()
            }
            self._revision = revision
            handle.add_metadata("keys", len(self._table))
        return self._table


__all__ = ["KeymapResolver"]
