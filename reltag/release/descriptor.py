"""Build descriptor version property.

The descriptor is a Java properties file read by Ant (``build.properties``).
Supported entry forms: ``key=value``, ``key: value`` and ``key value``.
Comment lines starting with ``#`` or ``!`` are never touched.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

from reltag.core.result import Err, Ok, Result
from reltag.platform.files import atomic_write_text
from reltag.release.errors import (
    DescriptorIOError,
    DescriptorNotFoundError,
    PropertyNotFoundError,
    ReleaseError,
)
from reltag.release.tag import Tag

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "apply_version",
    "read_version",
]


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """Disk access; line endings are preserved on read and write."""

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_text(self, path: Path, content: str) -> None:
        atomic_write_text(path, content, encoding="utf-8")


def _property_re(name: str) -> re.Pattern[str]:
    return re.compile(
        rf"(?m)^(?P<head>[ \t]*{re.escape(name)}(?:[ \t]*[=:][ \t]*|[ \t]+))"
        r"(?P<value>[^\r\n]*?)(?P<tail>[ \t]*)(?=\r?$)"
    )


def _continues(text: str, line_start: int) -> bool:
    """True if the line before ``line_start`` ends with an unescaped backslash."""
    if line_start == 0:
        return False
    previous = text[:line_start].removesuffix("\n").removesuffix("\r")
    trailing = len(previous) - len(previous.rstrip("\\"))
    return trailing % 2 == 1


def _definitions(text: str, key: str) -> list[re.Match[str]]:
    """Lines defining ``key``; continuation lines of another value are skipped."""
    return [m for m in _property_re(key).finditer(text) if not _continues(text, m.start())]


def _load(fs: FileSystem, path: Path) -> Result[str, ReleaseError]:
    if not fs.exists(path):
        return Err(DescriptorNotFoundError(path=path))
    try:
        return Ok(fs.read_text(path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(DescriptorIOError(path=path, reason=str(e)))


def read_version(
    fs: FileSystem,
    path: Path,
    *,
    key: str = "version",
) -> Result[str, ReleaseError]:
    """Value of the version property (first definition)."""
    loaded = _load(fs, path)
    if isinstance(loaded, Err):
        return loaded

    definitions = _definitions(loaded.value, key)
    if not definitions:
        return Err(PropertyNotFoundError(path=path, property=key))
    return Ok(definitions[0].group("value"))


def apply_version(
    fs: FileSystem,
    path: Path,
    tag: Tag,
    *,
    key: str = "version",
) -> Result[bool, ReleaseError]:
    """Rewrite the version property to match tag, without its ``v`` prefix.

    Every definition of the property is rewritten; formatting around the value
    is kept. The file is left untouched when it already holds the version.

    Returns:
        Ok(True) if the file was rewritten, Ok(False) if already up to date.
    """
    loaded = _load(fs, path)
    if isinstance(loaded, Err):
        return loaded
    text = loaded.value

    matches = _definitions(text, key)
    if not matches:
        return Err(PropertyNotFoundError(path=path, property=key))

    version = tag.version
    if all(m.group("value") == version for m in matches):
        return Ok(False)

    parts: list[str] = []
    pos = 0
    for m in matches:
        parts.append(text[pos : m.start("value")])
        parts.append(version)
        pos = m.end("value")
    parts.append(text[pos:])
    updated = "".join(parts)
    try:
        fs.write_text(path, updated)
    except OSError as e:
        return Err(DescriptorIOError(path=path, reason=str(e)))
    return Ok(True)
