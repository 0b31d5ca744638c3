"""Line storage backing an editor buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .errors import BufferValidationError

NEWLINE = "\n"


@dataclass(slots=True)
class LineStore:
    """Ordered list of lines, never empty.

    Newlines are implicit between adjacent lines and never stored inside one.
    Every mutation bumps ``version`` and marks the store ``dirty``.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]
        for line in self._lines:
            _check_line(line)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineStore":
        return cls(_lines=list(lines))

    @classmethod
    def from_text(cls, text: str) -> "LineStore":
        """Split ``text`` at LF; a trailing LF does not add an empty line."""

        lines = text.split(NEWLINE)
        if text.endswith(NEWLINE):
            lines.pop()
        return cls(_lines=lines)

    def to_text(self) -> str:
        """Serialize with one LF after every line, the last included."""

        return "".join(line + NEWLINE for line in self._lines)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> str:
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        _check_line(text)
        self._lines[index] = text
        self._touch()

    def insert_line(self, index: int, text: str) -> None:
        _check_line(text)
        if index < 0 or index > len(self._lines):
            raise BufferValidationError(f"Cannot insert line at {index}")
        self._lines.insert(index, text)
        self._touch()

    def erase_line(self, index: int) -> None:
        if len(self._lines) == 1:
            raise BufferValidationError("Cannot erase the only line; clear it instead")
        del self._lines[index]
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


def _check_line(text: str) -> None:
    if NEWLINE in text:
        raise BufferValidationError("Lines cannot contain a newline")
