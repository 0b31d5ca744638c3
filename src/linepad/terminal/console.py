"""Console keyboard and screen driver.

Windows consoles already speak the scan-code protocol through ``msvcrt``.
POSIX terminals send ANSI escape sequences instead; ``PosixByteSource``
puts the tty in cbreak mode and ``ConsoleTerminal`` rewrites the arrow and
delete sequences into lead byte + scan code before decoding.
"""

from __future__ import annotations

import os
import select
import shutil
import sys
from contextlib import AbstractContextManager
from typing import Any, Iterable, List, Optional, Protocol, TextIO

from linepad.config import EditorConfig
from linepad.dispatch.events import KeyInput
from linepad.runtime import telemetry

from .keys import (
    ESCAPE,
    EXTENDED_LEAD,
    SCAN_DELETE,
    SCAN_DOWN,
    SCAN_LEFT,
    SCAN_RIGHT,
    SCAN_UP,
    ScanCodeDecoder,
)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
ESCAPE_TIMEOUT = 0.05

# final byte of ``ESC [ <final>`` -> scan code
_CSI_FINALS = {
    ord("A"): SCAN_UP,
    ord("B"): SCAN_DOWN,
    ord("C"): SCAN_RIGHT,
    ord("D"): SCAN_LEFT,
}
# numeric parameter of ``ESC [ <n> ~`` -> scan code
_CSI_TILDE = {3: SCAN_DELETE}
_UNKNOWN_SCAN = 0


def _is_key_final(value: int) -> bool:
    # keyboards report keys with an upper-case final byte or "~"
    return ord("@") <= value <= ord("Z") or value == ord("~")


class ByteSource(Protocol):
    translates_ansi: bool

    def read_byte(self) -> int:
        ...

    def has_input(self, timeout: float) -> bool:
        ...


class PosixByteSource(AbstractContextManager["PosixByteSource"]):
    translates_ansi = True

    def __init__(self, fd: Optional[int] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved: Optional[List[Any]] = None

    def __enter__(self) -> "PosixByteSource":
        import termios
        import tty

        self._saved = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        import termios

        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
            self._saved = None
        return False

    def read_byte(self) -> int:
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("stdin closed")
        return data[0]

    def has_input(self, timeout: float) -> bool:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)


class WindowsByteSource(AbstractContextManager["WindowsByteSource"]):
    translates_ansi = False

    def __init__(self) -> None:
        import msvcrt

        self._msvcrt = msvcrt

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False

    def read_byte(self) -> int:
        return self._msvcrt.getch()[0]

    def has_input(self, timeout: float) -> bool:
        del timeout
        return bool(self._msvcrt.kbhit())


def default_byte_source() -> ByteSource:
    if sys.platform == "win32":
        return WindowsByteSource()
    return PosixByteSource()


class ConsoleTerminal:
    """Blocking key reader plus full-frame ANSI writer for one console."""

    def __init__(
        self,
        source: ByteSource,
        *,
        stream: Optional[TextIO] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.source = source
        self.stream = stream or sys.stdout
        self.config = config or EditorConfig()
        self.decoder = ScanCodeDecoder()
        self._queue: List[int] = []

    def poll_key(self) -> KeyInput:
        """Block until one complete key has been decoded."""

        while True:
            key = self.decoder.feed(self._next_byte())
            if key is not None:
                return key

    def clear_screen(self) -> None:
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    def write_frame(self, rows: Iterable[str]) -> None:
        self.stream.write("".join(f"{row}\n" for row in rows))
        self.stream.flush()

    def query_height(self) -> int:
        try:
            lines = os.get_terminal_size(self.stream.fileno()).lines
        except (AttributeError, OSError, ValueError):
            lines = shutil.get_terminal_size(fallback=(0, 0)).lines
        if lines < 1:
            telemetry.record_event(
                "terminal.height_fallback",
                level="debug",
                data={"height": self.config.default_height},
            )
            return self.config.default_height
        return lines

    def query_width(self) -> int:
        return shutil.get_terminal_size(fallback=(80, 24)).columns

    def _next_byte(self) -> int:
        if self._queue:
            return self._queue.pop(0)
        value = self.source.read_byte()
        if value == ESCAPE and self.source.translates_ansi:
            return self._translate_escape()
        return value

    def _translate_escape(self) -> int:
        if not self.source.has_input(ESCAPE_TIMEOUT):
            return ESCAPE
        introducer = self.source.read_byte()
        if introducer not in (ord("["), ord("O")):
            # ESC followed by something else: a lone Escape, then that key.
            self._queue.append(introducer)
            return ESCAPE

        body = bytearray()
        while self.source.has_input(ESCAPE_TIMEOUT):
            value = self.source.read_byte()
            body.append(value)
            if not (ord("0") <= value <= ord("9") or value == ord(";")):
                break

        final = body[-1] if body else None
        if final is None or not _is_key_final(final):
            # Not a key report: a lone Escape, then the bytes typed after it.
            self._queue.extend([introducer, *body])
            return ESCAPE

        params = bytes(body[:-1])
        if final == ord("~"):
            number = int(params.split(b";")[0] or b"0")
            code = _CSI_TILDE.get(number, _UNKNOWN_SCAN)
        else:
            code = _CSI_FINALS.get(final, _UNKNOWN_SCAN)
        self._queue.append(code)
        return EXTENDED_LEAD


__all__ = [
    "ConsoleTerminal",
    "ByteSource",
    "PosixByteSource",
    "WindowsByteSource",
    "default_byte_source",
    "CLEAR_SCREEN",
]
