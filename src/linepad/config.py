"""Editor settings read from ``LINEPAD_*`` environment variables."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "LINEPAD_"

DEFAULT_HEIGHT = 10
DEFAULT_RESERVED_ROWS = 2
DEFAULT_ENCODING = "latin-1"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Settings shared by the console host, the Textual host and storage.

    ``default_height`` is the window height used when the terminal cannot be
    queried. ``reserved_rows`` are kept free below the text rows (the status
    line uses one of them).
    """

    default_height: int = DEFAULT_HEIGHT
    reserved_rows: int = DEFAULT_RESERVED_ROWS
    status_line: bool = True
    encoding: str = DEFAULT_ENCODING

    def text_rows(self, terminal_height: int) -> int:
        return max(terminal_height - self.reserved_rows, 1)


def _env_int(environ: Mapping[str, str], name: str, fallback: int, *, minimum: int) -> int:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value >= minimum else fallback


def _env_flag(environ: Mapping[str, str], name: str, fallback: bool) -> bool:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return fallback
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_encoding(environ: Mapping[str, str], fallback: str) -> str:
    raw = environ.get(f"{ENV_PREFIX}ENCODING")
    if not raw:
        return fallback
    try:
        return codecs.lookup(raw).name
    except LookupError:
        return fallback


def load_config(environ: Optional[Mapping[str, str]] = None) -> EditorConfig:
    env = os.environ if environ is None else environ
    return EditorConfig(
        default_height=_env_int(env, "DEFAULT_HEIGHT", DEFAULT_HEIGHT, minimum=1),
        reserved_rows=_env_int(env, "RESERVED_ROWS", DEFAULT_RESERVED_ROWS, minimum=0),
        status_line=_env_flag(env, "STATUS_LINE", True),
        encoding=_env_encoding(env, DEFAULT_ENCODING),
    )


__all__ = ["EditorConfig", "load_config"]
