from __future__ import annotations

from typing import Iterable, List, Sequence

import pytest

from linepad.dispatch import KeyInput


class FakeTerminal:
    """Scripted terminal recording every frame it is asked to draw."""

    def __init__(self, keys: Iterable[KeyInput], *, height: int = 5, width: int = 40) -> None:
        self._keys = list(keys)
        self.height = height
        self.width = width
        self.frames: List[List[str]] = []
        self.clears = 0

    def poll_key(self) -> KeyInput:
        if not self._keys:
            raise AssertionError("session asked for more keys than scripted")
        return self._keys.pop(0)

    def clear_screen(self) -> None:
        self.clears += 1

    def write_frame(self, rows: Sequence[str]) -> None:
        self.frames.append(list(rows))

    def query_height(self) -> int:
        return self.height

    def query_width(self) -> int:
        return self.width


def as_keys(*tokens: str) -> List[KeyInput]:
    # single characters are printable keys, longer tokens are named keys
    return [
        KeyInput(key=token, text=token) if len(token) == 1 else KeyInput(key=token)
        for token in tokens
    ]


@pytest.fixture
def make_terminal():
    def factory(*tokens: str, height: int = 5, width: int = 40) -> FakeTerminal:
        return FakeTerminal(as_keys(*tokens), height=height, width=width)

    return factory
