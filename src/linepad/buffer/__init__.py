"""Line store, cursor state, and the edit operations over them."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction, is_insertable
from .document import LineStore
from .motion import Direction
from .state import Cursor, CursorState
from .errors import BufferValidationError
from .validation import check_invariants, ensure_cursor

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "is_insertable",
    "LineStore",
    "Direction",
    "Cursor",
    "CursorState",
    "BufferValidationError",
    "check_invariants",
    "ensure_cursor",
]
