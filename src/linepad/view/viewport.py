"""Window of buffer rows that follows the cursor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Viewport:
    """``top_row`` plus the number of text rows the host can show.

    ``follow`` scrolls the minimum amount needed to keep a row visible; it
    never re-centres.
    """

    height: int
    top_row: int = 0

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ValueError("Viewport height must be at least 1")
        if self.top_row < 0:
            raise ValueError("Viewport top_row cannot be negative")

    def follow(self, row: int) -> int:
        if row < self.top_row:
            self.top_row = row
        elif row >= self.top_row + self.height:
            self.top_row = row - self.height + 1
        return self.top_row

    def resize(self, height: int, *, row: int) -> int:
        if height < 1:
            raise ValueError("Viewport height must be at least 1")
        self.height = height
        return self.follow(row)

    def visible_rows(self) -> range:
        return range(self.top_row, self.top_row + self.height)

    def contains(self, row: int) -> bool:
        return self.top_row <= row < self.top_row + self.height
