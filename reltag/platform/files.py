"""Filesystem helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["append_lines", "atomic_write_text"]


def atomic_write_text(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Replace path's content in one step (temp file in the same dir + rename).

    Line endings in content are written as-is.
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=str(path.parent),
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode)
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


def append_lines(path: Path, lines: list[str], *, encoding: str = "utf-8") -> None:
    """Append lines to path, creating it if needed."""
    with path.open("a", encoding=encoding) as handle:
        for line in lines:
            handle.write(f"{line}\n")
