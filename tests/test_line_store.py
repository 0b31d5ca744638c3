import pytest

from linepad.buffer import BufferValidationError, LineStore


def test_default_store_is_one_empty_line() -> None:
    store = LineStore()

    assert store.line_count == 1
    assert store.line_at(0) == ""
    assert store.dirty is False


def test_from_text_ignores_trailing_newline() -> None:
    assert LineStore.from_text("a\nb\n").snapshot() == ("a", "b")
    assert LineStore.from_text("a\nb").snapshot() == ("a", "b")
    assert LineStore.from_text("").snapshot() == ("",)
    assert LineStore.from_text("\n").snapshot() == ("",)
    assert LineStore.from_text("\n\n").snapshot() == ("", "")


def test_from_text_keeps_carriage_returns() -> None:
    store = LineStore.from_text("one\r\ntwo\r\n")

    assert store.snapshot() == ("one\r", "two\r")


def test_to_text_terminates_every_line() -> None:
    store = LineStore.from_lines(["x", "", "y"])

    assert store.to_text() == "x\n\ny\n"
    assert LineStore().to_text() == "\n"


def test_insert_line_shifts_following_lines() -> None:
    store = LineStore.from_lines(["a", "c"])

    store.insert_line(1, "b")
    store.insert_line(3, "d")

    assert store.snapshot() == ("a", "b", "c", "d")
    assert store.version == 2
    assert store.dirty is True


def test_set_line_rejects_newlines() -> None:
    store = LineStore()

    with pytest.raises(BufferValidationError):
        store.set_line(0, "a\nb")
    with pytest.raises(BufferValidationError):
        store.insert_line(0, "\n")


def test_erase_line_refuses_to_empty_the_store() -> None:
    store = LineStore.from_lines(["a", "b"])

    store.erase_line(0)
    assert store.snapshot() == ("b",)

    with pytest.raises(BufferValidationError):
        store.erase_line(0)
    assert store.snapshot() == ("b",)


def test_empty_line_list_becomes_single_empty_line() -> None:
    assert LineStore.from_lines([]).snapshot() == ("",)
