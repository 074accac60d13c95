"""Process and filesystem primitives."""

from .files import append_lines, atomic_write_text
from .process import ProcessError, run

__all__ = [
    "ProcessError",
    "append_lines",
    "atomic_write_text",
    "run",
]
