"""Textual host for the editor."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the host is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use linepad.adapters.textual.app"
    ) from exc

from linepad.cli import EXIT_NO_PATH, EXIT_OK, EXIT_SAVE_FAILED, prompt_for_path
from linepad.config import EditorConfig, load_config
from linepad.session import EditorSession
from linepad.storage import PathUnwritableError

from .controller import TextualEditorAdapter, TextualUIHooks

# header + status line
CHROME_ROWS = 2


class LinepadApp(App[None]):
    """Single-file editor screen: header, frame, status line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#frame-view {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        # Tab would otherwise move focus.
        ("tab", "insert_tab", "Tab"),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._frame_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._frame_widget = Static("", id="frame-view")
        self._status_widget = Static("", id="status-line")
        yield self._frame_widget
        yield self._status_widget

    def on_mount(self) -> None:
        self.title = str(self.session.path or "linepad")
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            update_status=self._update_status,
            handle_event=self._handle_event,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.adapter.resize(self.size.height - CHROME_ROWS)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.height - CHROME_ROWS)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+q", "tab"}:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def action_insert_tab(self) -> None:
        if self.adapter:
            self.adapter.handle_textual_key("tab")

    def _update_frame(self, rows: List[str]) -> None:
        if self._frame_widget:
            self._frame_widget.update(Text.from_ansi("\n".join(rows)))

    def _update_status(self, status: str) -> None:
        row, col = self.session.buffer.cursor
        dirty = " [+]" if self.session.buffer.store.dirty else ""
        if self._status_widget:
            self._status_widget.update(f"{row + 1}:{col + 1}{dirty}  {status}")

    def _handle_event(self, name: str, payload: object | None) -> None:
        del payload
        if name == "session.quit":
            self.exit()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a text file in a Textual UI.")
    parser.add_argument(
        "path",
        nargs="?",
        help="File to edit (prompted for when omitted)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    token = args.path or prompt_for_path(sys.stdin, sys.stdout)
    if not token:
        sys.stderr.write("linepad: no file path given\n")
        return EXIT_NO_PATH

    config: EditorConfig = dataclasses.replace(load_config(), status_line=False)
    session = EditorSession.open(
        Path(token), height=config.default_height, config=config
    )
    LinepadApp(session).run()
    try:
        session.save()
    except PathUnwritableError as exc:
        sys.stderr.write(f"linepad: {exc}\n")
        return EXIT_SAVE_FAILED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
