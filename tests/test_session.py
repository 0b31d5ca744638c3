from __future__ import annotations

from pathlib import Path

from linepad.buffer import Buffer
from linepad.config import EditorConfig, load_config
from linepad.dispatch import KeyInput
from linepad.session import EditorSession, SessionState


def make_session(*lines: str, height: int = 3, **kwargs) -> EditorSession:
    return EditorSession(Buffer.from_lines(list(lines) or [""]), height=height, **kwargs)


def test_viewport_follows_cursor_through_session() -> None:
    session = make_session(*[f"row {i}" for i in range(10)], height=3)

    for _ in range(4):
        session.handle_key(KeyInput(key="DOWN"))
    assert session.buffer.cursor == (4, 0)
    assert session.viewport.top_row == 2

    for _ in range(3):
        session.handle_key(KeyInput(key="UP"))
    assert session.buffer.cursor == (1, 0)
    assert session.viewport.top_row == 1


def test_escape_moves_session_to_quitting() -> None:
    session = make_session("text")

    result = session.handle_key(KeyInput(key="ESC"))

    assert result.stop is True
    assert session.state is SessionState.QUITTING
    assert session.running is False

    ignored = session.handle_key(KeyInput(key="x", text="x"))
    assert ignored.consumed is False
    assert session.buffer.lines == ("text",)


def test_frame_has_text_rows_plus_status_line() -> None:
    session = make_session("a", height=3, path=Path("notes.txt"))

    frame = session.frame(width=20)

    assert len(frame) == 4
    assert frame[1:3] == ["~", "~"]
    assert "notes.txt" in frame[3]


def test_frame_without_status_line() -> None:
    session = make_session("a", height=2, config=EditorConfig(status_line=False))

    assert len(session.frame()) == 2


def test_run_loop_applies_keys_and_stops_on_escape(make_terminal) -> None:
    session = make_session("", height=3)
    terminal = make_terminal("H", "i", "ENTER", "!", "ESC", height=5)

    session.run(terminal)

    assert session.buffer.lines == ("Hi", "!")
    assert session.buffer.cursor == (1, 1)
    assert session.state is SessionState.QUITTING
    # initial frame plus one per key before Escape
    assert len(terminal.frames) == 5
    assert terminal.clears == 6


def test_run_loop_resizes_viewport_from_terminal_height(make_terminal) -> None:
    session = make_session(*[str(i) for i in range(20)], height=10)
    terminal = make_terminal("DOWN", "ESC", height=6)

    session.run(terminal)

    # six terminal rows minus the two reserved rows
    assert session.viewport.height == 4


def test_open_and_save_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_bytes(b"first\nsecond")

    session = EditorSession.open(target, height=5)
    for key in (KeyInput(key="DOWN"), KeyInput(key="DELETE"), KeyInput(key="ESC")):
        session.handle_key(key)
    written = session.save()

    assert target.read_bytes() == b"first\necond\n"
    assert written == len(b"first\necond\n")
    assert session.buffer.store.dirty is False


def test_open_missing_file_starts_empty(tmp_path: Path) -> None:
    target = tmp_path / "new.txt"

    session = EditorSession.open(target, height=5)
    session.handle_key(KeyInput(key="ESC"))
    session.save()

    assert session.buffer.lines == ("",)
    assert target.read_bytes() == b"\n"


def test_unknown_encoding_setting_still_opens_file(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_bytes(b"caf\xe9\n")

    session = EditorSession.open(
        target, height=3, config=load_config({"LINEPAD_ENCODING": "bogus"})
    )

    assert session.buffer.lines == ("caf\xe9",)
