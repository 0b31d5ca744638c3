"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import NEWLINE, LineStore
from .state import Cursor
from .errors import BufferValidationError


def ensure_cursor(store: LineStore, cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= store.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > len(store.line_at(row)):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def check_invariants(store: LineStore, cursor: Cursor) -> None:
    """Raise ``BufferValidationError`` unless the store and cursor are well formed."""

    if store.line_count < 1:
        raise BufferValidationError("Line store is empty", cursor=cursor)
    for line in store.snapshot():
        if NEWLINE in line:
            raise BufferValidationError("Line contains a newline", cursor=cursor)
    ensure_cursor(store, cursor)
