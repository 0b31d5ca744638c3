"""Load and save the edited file.

Files are decoded as latin-1 by default so that every byte becomes exactly
one character and saving writes back the same bytes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from linepad.buffer import LineStore
from linepad.runtime import telemetry

PathLike = Union[str, Path]


class PathUnwritableError(OSError):
    """The saver could not open or write the target path."""

    def __init__(self, path: PathLike, reason: OSError) -> None:
        super().__init__(f"Cannot write {path}: {reason.strerror or reason}")
        self.path = Path(path)
        self.reason = reason


def load_document(path: PathLike, *, encoding: str = "latin-1") -> LineStore:
    """Read ``path`` into a line store.

    A missing file is a new, empty document. Any other read failure is
    recorded and also yields an empty document; the eventual save creates
    or overwrites the file.
    """

    target = Path(path)
    with telemetry.span(
        "storage::load", component="storage", metadata={"path": str(target)}
    ) as handle:
        try:
            with target.open(
                "r", encoding=encoding, errors="surrogateescape", newline=""
            ) as stream:
                text = stream.read()
        except FileNotFoundError:
            handle.add_metadata("status", "new_file")
            return LineStore()
        except OSError as exc:
            handle.add_metadata("status", "unreadable")
            telemetry.record_event(
                "storage.load_failed",
                level="warning",
                data={"path": str(target), "error": str(exc)},
            )
            return LineStore()

        store = LineStore.from_text(text)
        handle.add_metadata("lines", store.line_count)
        return store


def save_document(
    path: PathLike, store: LineStore, *, encoding: str = "latin-1"
) -> int:
    """Write every line followed by LF; return the number of bytes written."""

    target = Path(path)
    with telemetry.span(
        "storage::save", component="storage", metadata={"path": str(target)}
    ):
        data = store.to_text().encode(encoding, errors="surrogateescape")
        try:
            with target.open("wb") as stream:
                stream.write(data)
        except OSError as exc:
            telemetry.record_event(
                "storage.save_failed",
                level="error",
                data={"path": str(target), "error": str(exc)},
            )
            raise PathUnwritableError(target, exc) from exc
        store.dirty = False
        return len(data)


__all__ = ["load_document", "save_document", "PathUnwritableError"]
