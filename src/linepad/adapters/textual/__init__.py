"""Textual adapter: controller plus an executable app."""

from .controller import TextualEditorAdapter, TextualUIHooks, normalize_textual_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_textual_key"]
