"""One editing session: a buffer, its viewport, and the key loop around them."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from linepad.buffer import Buffer
from linepad.config import EditorConfig
from linepad.dispatch import EditorContext, EventBus, InputDispatcher, KeyInput, KeyResult
from linepad.keymaps import KeymapRegistry, KeymapResolver
from linepad.keymaps.defaults import load_default_keymaps
from linepad.runtime import telemetry
from linepad.storage import load_document, save_document
from linepad.view import FrameRenderer, Viewport


class SessionState(str, Enum):
    RUNNING = "running"
    QUITTING = "quitting"


class Terminal(Protocol):
    def poll_key(self) -> KeyInput:
        ...

    def clear_screen(self) -> None:
        ...

    def write_frame(self, rows: Sequence[str]) -> None:
        ...

    def query_height(self) -> int:
        ...

    def query_width(self) -> int:
        ...


def create_dispatcher(
    buffer: Buffer, *, registry: Optional[KeymapRegistry] = None
) -> InputDispatcher:
    """Build a dispatcher over the default keymap unless a registry is given."""

    if registry is None:
        registry = load_default_keymaps(KeymapRegistry(logger_name="linepad.keymaps"))
    resolver = KeymapResolver(registry, logger_name="linepad.keymaps")
    return InputDispatcher(EditorContext(buffer=buffer), resolver)


class EditorSession:
    """Owns one buffer, cursor and viewport from load to save.

    Every key is applied completely before the next frame is produced, and
    once ``Quit`` has been dispatched the session ignores further keys.
    """

    def __init__(
        self,
        buffer: Buffer,
        *,
        height: int,
        path: Optional[Path] = None,
        config: Optional[EditorConfig] = None,
        renderer: Optional[FrameRenderer] = None,
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.buffer = buffer
        self.path = path
        self.config = config or EditorConfig()
        self.renderer = renderer or FrameRenderer()
        self.viewport = Viewport(height=height)
        self.dispatcher = create_dispatcher(buffer, registry=registry)
        self.state = SessionState.RUNNING
        self.viewport.follow(buffer.cursor[0])

    @classmethod
    def open(
        cls,
        path: Path,
        *,
        height: int,
        config: Optional[EditorConfig] = None,
    ) -> "EditorSession":
        config = config or EditorConfig()
        store = load_document(path, encoding=config.encoding)
        buffer = Buffer(name=str(path), store=store)
        return cls(buffer, height=height, path=path, config=config)

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def bus(self) -> EventBus:
        return self.dispatcher.context.bus

    def handle_key(self, key: KeyInput) -> KeyResult:
        if not self.running:
            return KeyResult(consumed=False, status="stopped")
        result = self.dispatcher.handle_key(key)
        self.viewport.follow(self.buffer.cursor[0])
        if result.stop:
            self.state = SessionState.QUITTING
            telemetry.record_event(
                "session.quit", data={"buffer": self.buffer.name}
            )
        return result

    def resize(self, height: int) -> None:
        self.viewport.resize(height, row=self.buffer.cursor[0])

    def frame(self, *, width: int = 0) -> List[str]:
        view = self.buffer.snapshot()
        rows = self.renderer.render(view, self.viewport)
        if self.config.status_line:
            name = str(self.path) if self.path is not None else None
            rows.append(self.renderer.status_line(view, path=name, width=width))
        return rows

    def redraw(self, terminal: Terminal) -> None:
        terminal.clear_screen()
        terminal.write_frame(self.frame(width=terminal.query_width()))

    def run(self, terminal: Terminal) -> None:
        """Read, apply and redraw until the session stops."""

        with telemetry.span(
            "session::run", component="session", metadata={"buffer": self.buffer.name}
        ):
            self.redraw(terminal)
            while self.running:
                key = terminal.poll_key()
                self.resize(self.config.text_rows(terminal.query_height()))
                self.handle_key(key)
                if self.running:
                    self.redraw(terminal)
            terminal.clear_screen()

    def save(self) -> int:
        if self.path is None:
            raise ValueError("Session has no path to save to")
        return save_document(self.path, self.buffer.store, encoding=self.config.encoding)


__all__ = ["EditorSession", "SessionState", "Terminal", "create_dispatcher"]
