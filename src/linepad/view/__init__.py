"""Viewport scrolling and frame rendering."""

from .renderer import CURSOR_CELL, EMPTY_ROW, FrameRenderer, digit_count
from .viewport import Viewport

__all__ = ["FrameRenderer", "Viewport", "CURSOR_CELL", "EMPTY_ROW", "digit_count"]
