"""Decode the console key protocol into ``KeyInput`` events.

The protocol is the classic DOS/Windows ``getch`` one: printable keys arrive
as their own byte, navigation and delete keys as a lead byte (``0`` or
``0xE0``) followed by a scan code.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from linepad.dispatch.events import KeyInput

LEAD_BYTES = frozenset({0x00, 0xE0})
EXTENDED_LEAD = 0xE0

SCAN_UP = 72
SCAN_DOWN = 80
SCAN_LEFT = 75
SCAN_RIGHT = 77
SCAN_DELETE = 83

ESCAPE = 27
ENTER = 13
LINE_FEED = 10
TAB = 9
BACKSPACE = 8
DEL = 127

SCAN_CODES = {
    SCAN_UP: "UP",
    SCAN_DOWN: "DOWN",
    SCAN_LEFT: "LEFT",
    SCAN_RIGHT: "RIGHT",
    SCAN_DELETE: "DELETE",
}

CONTROL_BYTES = {
    ESCAPE: "ESC",
    ENTER: "ENTER",
    LINE_FEED: "ENTER",
    TAB: "TAB",
    BACKSPACE: "BACKSPACE",
    DEL: "BACKSPACE",
}


def decode_scan_code(code: int) -> KeyInput:
    return KeyInput(key=SCAN_CODES.get(code, f"SCAN_{code}"))


def decode_byte(value: int) -> KeyInput:
    """Decode one non-lead byte; unknown bytes get a token no binding uses."""

    if value in CONTROL_BYTES:
        return KeyInput(key=CONTROL_BYTES[value])
    if 0x20 <= value <= 0x7E:
        char = chr(value)
        return KeyInput(key=char, text=char)
    return KeyInput(key=f"BYTE_{value}")


class ScanCodeDecoder:
    """Stateful decoder fed one byte at a time."""

    def __init__(self) -> None:
        self._awaiting_scan = False

    @property
    def pending(self) -> bool:
        return self._awaiting_scan

    def feed(self, value: int) -> Optional[KeyInput]:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Not a byte: {value}")
        if self._awaiting_scan:
            self._awaiting_scan = False
            return decode_scan_code(value)
        if value in LEAD_BYTES:
            self._awaiting_scan = True
            return None
        return decode_byte(value)

    def decode(self, data: Iterable[int]) -> List[KeyInput]:
        keys: List[KeyInput] = []
        for value in data:
            key = self.feed(value)
            if key is not None:
                keys.append(key)
        return keys


__all__ = [
    "ScanCodeDecoder",
    "decode_byte",
    "decode_scan_code",
    "SCAN_CODES",
    "CONTROL_BYTES",
    "LEAD_BYTES",
    "EXTENDED_LEAD",
]
