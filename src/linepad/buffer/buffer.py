"""Buffer façade: a line store, its cursor, and the edit operations on both."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Sequence

from linepad.runtime import telemetry

from . import motion
from .document import LineStore
from .motion import Direction
from .state import Cursor, CursorState
from .validation import ensure_cursor

TAB = "\t"


@dataclass(slots=True)
class BufferView:
    """Read-only snapshot handed to renderers."""

    version: int
    lines: Sequence[str]
    cursor: Cursor
    dirty: bool

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass(slots=True)
class BufferDelta:
    version: int
    cursor: Cursor
    label: str
    changed: bool


def is_insertable(char: str) -> bool:
    """True for a single printable ASCII character or a horizontal tab."""

    return len(char) == 1 and (char == TAB or " " <= char <= "~")


class Buffer:
    def __init__(
        self,
        *,
        name: str = "untitled",
        store: Optional[LineStore] = None,
        state: Optional[CursorState] = None,
    ) -> None:
        self.name = name
        self.store = store or LineStore()
        self.state = state or CursorState()
        ensure_cursor(self.store, self.state.cursor)

    @classmethod
    def from_text(cls, text: str, *, name: str = "untitled") -> "Buffer":
        return cls(name=name, store=LineStore.from_text(text))

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], *, cursor: Cursor = (0, 0), name: str = "untitled"
    ) -> "Buffer":
        buffer = cls(name=name, store=LineStore.from_lines(lines))
        buffer.state.set_cursor(*ensure_cursor(buffer.store, cursor))
        return buffer

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def lines(self) -> Sequence[str]:
        return self.store.snapshot()

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.store.version,
            lines=self.store.snapshot(),
            cursor=self.state.cursor,
            dirty=self.store.dirty,
        )

    def insert_char(self, char: str) -> BufferDelta:
        if not is_insertable(char):
            raise ValueError(f"Cannot insert {char!r}")
        with Transaction(self, "insert_char") as tx:
            row, col = self.state.cursor
            line = self.store.line_at(row)
            if col >= len(line):
                self.store.set_line(row, line + char)
            else:
                self.store.set_line(row, line[:col] + char + line[col:])
            self.state.set_cursor(row, col + 1)
        return tx.delta()

    def insert_tab(self) -> BufferDelta:
        return self.insert_char(TAB)

    def insert_newline(self) -> BufferDelta:
        with Transaction(self, "insert_newline") as tx:
            row, col = self.state.cursor
            line = self.store.line_at(row)
            self.store.set_line(row, line[:col])
            self.store.insert_line(row + 1, line[col:])
            self.state.set_cursor(row + 1, 0)
        return tx.delta()

    def delete_prev(self) -> BufferDelta:
        """Backspace: remove the character before the cursor, joining lines at column 0."""

        with Transaction(self, "delete_prev") as tx:
            row, col = self.state.cursor
            if col > 0:
                line = self.store.line_at(row)
                self.store.set_line(row, line[: col - 1] + line[col:])
                self.state.set_cursor(row, col - 1)
            elif row > 0:
                previous = self.store.line_at(row - 1)
                self.store.set_line(row - 1, previous + self.store.line_at(row))
                self.store.erase_line(row)
                self.state.set_cursor(row - 1, len(previous))
        return tx.delta()

    def delete_next(self) -> BufferDelta:
        """Forward delete: remove the character under the cursor; the cursor stays put."""

        with Transaction(self, "delete_next") as tx:
            row, col = self.state.cursor
            line = self.store.line_at(row)
            if col < len(line):
                self.store.set_line(row, line[:col] + line[col + 1 :])
            elif row < self.store.line_count - 1:
                self.store.set_line(row, line + self.store.line_at(row + 1))
                self.store.erase_line(row + 1)
        return tx.delta()

    def move_cursor(self, direction: Direction) -> BufferDelta:
        with Transaction(self, f"move_{Direction(direction).value}") as tx:
            self.state.set_cursor(
                *motion.move(self.store, self.state.cursor, direction)
            )
        return tx.delta()


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one edit operation in a telemetry span and records what changed."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_version = buffer.store.version
        self._before_cursor: Cursor = buffer.state.cursor

    def __enter__(self) -> "Transaction":
        self._before_version = self.buffer.store.version
        self._before_cursor = self.buffer.state.cursor
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    @property
    def mutated(self) -> bool:
        return self.buffer.store.version != self._before_version

    def delta(self) -> BufferDelta:
        return BufferDelta(
            version=self.buffer.store.version,
            cursor=self.buffer.state.cursor,
            label=self.label,
            changed=self.mutated or self.buffer.state.cursor != self._before_cursor,
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                ensure_cursor(self.buffer.store, self.buffer.state.cursor)
                if self.mutated:
                    self.buffer.state.last_change_tick = self.buffer.store.version
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False
