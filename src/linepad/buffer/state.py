"""Cursor state tracked alongside a line store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class CursorState:
    """Mutable cursor holding indices only, never line references."""

    cursor: Cursor = (0, 0)
    last_change_tick: int = 0

    @property
    def row(self) -> int:
        return self.cursor[0]

    @property
    def col(self) -> int:
        return self.cursor[1]

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)
