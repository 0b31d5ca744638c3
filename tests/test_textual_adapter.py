from __future__ import annotations

from typing import List

from linepad.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    normalize_textual_key,
)
from linepad.buffer import Buffer
from linepad.session import EditorSession


def make_adapter(*lines: str, **hook_overrides) -> tuple[TextualEditorAdapter, List[List[str]]]:
    frames: List[List[str]] = []
    hooks = TextualUIHooks(update_frame=frames.append, **hook_overrides)
    session = EditorSession(Buffer.from_lines(list(lines) or [""]), height=3)
    return TextualEditorAdapter(session, hooks), frames


def test_normalize_named_and_printable_keys() -> None:
    assert normalize_textual_key("up").key == "UP"
    assert normalize_textual_key("ctrl+h").key == "BACKSPACE"
    assert normalize_textual_key("escape").key == "ESC"

    letter = normalize_textual_key("a", "a")
    assert (letter.key, letter.text) == ("a", "a")

    space = normalize_textual_key("space", " ")
    assert (space.key, space.text) == (" ", " ")

    assert normalize_textual_key("f5").key == "F5"


def test_adapter_pushes_frame_on_start_and_after_keys() -> None:
    adapter, frames = make_adapter("ab")
    assert len(frames) == 1

    adapter.handle_textual_key("x", character="x")
    adapter.handle_textual_key("enter")

    assert adapter.session.buffer.lines == ("x", "ab")
    assert len(frames) == 3
    assert len(frames[-1]) == 4  # three text rows plus the status line


def test_adapter_reports_status_messages() -> None:
    statuses: List[str] = []
    adapter, _ = make_adapter("ab", update_status=statuses.append)

    adapter.handle_textual_key("right")
    adapter.handle_textual_key("f5")
    adapter.handle_textual_key("backspace")

    assert statuses == ["move_right", "ignored", "delete_prev"]


def test_adapter_relays_quit_event() -> None:
    events: List[tuple[str, object | None]] = []
    adapter, _ = make_adapter(
        "text", handle_event=lambda name, payload: events.append((name, payload))
    )

    result = adapter.handle_textual_key("escape")

    assert result.stop is True
    assert events == [("session.quit", adapter.session.buffer.name)]
    assert adapter.session.running is False


def test_adapter_resize_clamps_height() -> None:
    adapter, frames = make_adapter(*[str(i) for i in range(5)])

    adapter.resize(0)

    assert adapter.session.viewport.height == 1
    assert len(frames[-1]) == 2


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter, _ = make_adapter("", log=logs.append)

    adapter.handle_textual_key("a", character="a")

    assert any(line.startswith("key ->") for line in logs)
    assert any("status='ok'" in line for line in logs)
