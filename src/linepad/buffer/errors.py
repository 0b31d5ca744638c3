"""Errors raised by the buffer layer."""

from __future__ import annotations

from .state import Cursor


class BufferValidationError(RuntimeError):
    """A cursor or line store operation would leave the legal range.

    These are programming errors: the edit operations never produce them
    from user input.
    """

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
