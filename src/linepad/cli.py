"""Console entry point: prompt for a path, edit it, save it on exit."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from linepad.config import EditorConfig, load_config
from linepad.runtime import telemetry
from linepad.session import EditorSession
from linepad.storage import PathUnwritableError
from linepad.terminal import ConsoleTerminal, default_byte_source

PROMPT = "Enter file path: "

EXIT_OK = 0
EXIT_SAVE_FAILED = 1
EXIT_NO_PATH = 2


def prompt_for_path(stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Write the prompt and read one whitespace-delimited token.

    Blank lines are skipped; end of input returns ``None``.
    """

    stdout.write(PROMPT)
    stdout.flush()
    while True:
        line = stdin.readline()
        if not line:
            return None
        tokens = line.split()
        if tokens:
            return tokens[0]


def edit_file(path: Path, config: EditorConfig) -> EditorSession:
    """Run an interactive session on ``path`` and return it once it stops."""

    with default_byte_source() as source:
        terminal = ConsoleTerminal(source, config=config)
        session = EditorSession.open(
            path, height=config.text_rows(terminal.query_height()), config=config
        )
        try:
            session.run(terminal)
        except KeyboardInterrupt:
            # Ctrl-C ends the session like Escape; the buffer is still saved.
            terminal.clear_screen()
    return session


def main() -> int:
    config = load_config()
    token = prompt_for_path(sys.stdin, sys.stdout)
    if token is None:
        sys.stderr.write("linepad: no file path given\n")
        return EXIT_NO_PATH

    path = Path(token)
    telemetry.record_event("session.start", data={"path": str(path)})
    session = edit_file(path, config)
    try:
        written = session.save()
    except PathUnwritableError as exc:
        sys.stderr.write(f"linepad: {exc}\n")
        return EXIT_SAVE_FAILED
    telemetry.record_event("session.saved", data={"path": str(path), "bytes": written})
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
