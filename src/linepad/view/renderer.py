"""Project a buffer snapshot through a viewport into ANSI-styled rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from linepad.buffer import BufferView

from .viewport import Viewport

DIM = "\x1b[90m"
REVERSE = "\x1b[7m"
RESET = "\x1b[0m"
CURSOR_CELL = f"{REVERSE} {RESET}"
EMPTY_ROW = "~"


def digit_count(value: int) -> int:
    return len(str(max(value, 0)))


@dataclass(slots=True)
class FrameRenderer:
    """Stateless renderer; the viewport must already follow the cursor.

    Tabs are emitted as-is, so on lines containing tabs the cursor cell sits
    at the byte offset rather than the visual column.
    """

    show_gutter: bool = True

    def gutter(self, index: int, line_count: int) -> str:
        width = digit_count(line_count) + 1
        return f"{DIM}{str(index + 1).ljust(width)} {RESET}"

    def render_line(self, view: BufferView, index: int) -> str:
        text = view.lines[index]
        row, col = view.cursor
        if index == row:
            text = text[:col] + CURSOR_CELL + text[col:]
        if self.show_gutter:
            return self.gutter(index, view.line_count) + text
        return text

    def render(self, view: BufferView, viewport: Viewport) -> List[str]:
        rows: List[str] = []
        for index in viewport.visible_rows():
            if index < view.line_count:
                rows.append(self.render_line(view, index))
            else:
                rows.append(EMPTY_ROW)
        return rows

    def status_line(
        self, view: BufferView, *, path: Optional[str] = None, width: int = 0
    ) -> str:
        row, col = view.cursor
        name = path or "[No Name]"
        flag = " [+]" if view.dirty else ""
        left = f" {name}{flag}"
        right = f"{row + 1}:{col + 1} "
        gap = max(width - len(left) - len(right), 1)
        return f"{REVERSE}{left}{' ' * gap}{right}{RESET}"


__all__ = [
    "FrameRenderer",
    "CURSOR_CELL",
    "DIM",
    "REVERSE",
    "RESET",
    "EMPTY_ROW",
    "digit_count",
]
