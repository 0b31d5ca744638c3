from __future__ import annotations

from pathlib import Path

import pytest

from linepad.buffer import LineStore
from linepad.storage import PathUnwritableError, load_document, save_document


def test_missing_file_loads_as_single_empty_line(tmp_path: Path) -> None:
    store = load_document(tmp_path / "absent.txt")

    assert store.snapshot() == ("",)
    assert store.dirty is False


def test_load_splits_on_line_feed_and_keeps_carriage_returns(tmp_path: Path) -> None:
    target = tmp_path / "dos.txt"
    target.write_bytes(b"one\r\ntwo\r\n")

    store = load_document(target)

    assert store.snapshot() == ("one\r", "two\r")


def test_save_appends_line_feed_after_every_line(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    store = LineStore.from_lines(["alpha", "", "beta"])
    store.dirty = True

    written = save_document(target, store)

    assert target.read_bytes() == b"alpha\n\nbeta\n"
    assert written == 12
    assert store.dirty is False


def test_load_then_save_preserves_non_ascii_bytes(tmp_path: Path) -> None:
    target = tmp_path / "bytes.txt"
    original = b"caf\xc3\xa9 \xff\x80\n"
    target.write_bytes(original)

    save_document(target, load_document(target))

    assert target.read_bytes() == original


def test_save_is_idempotent_for_unedited_documents(tmp_path: Path) -> None:
    target = tmp_path / "same.txt"
    target.write_bytes(b"x\ny\n")

    save_document(target, load_document(target))
    first = target.read_bytes()
    save_document(target, load_document(target))

    assert target.read_bytes() == first == b"x\ny\n"


def test_unreadable_path_loads_empty_document(tmp_path: Path) -> None:
    # a directory cannot be opened as a file
    store = load_document(tmp_path)

    assert store.snapshot() == ("",)


def test_unwritable_path_raises(tmp_path: Path) -> None:
    with pytest.raises(PathUnwritableError) as info:
        save_document(tmp_path, LineStore())

    assert info.value.path == tmp_path
    assert isinstance(info.value.reason, OSError)
