from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from reltag.core.result import Err, Ok, Result
from reltag.release.errors import MalformedTagError

TAG_PREFIX = "v"

_TAG_RE = re.compile(r"^v([0-9]+)\.([0-9]+)\.([0-9]+)$")


@dataclass(frozen=True, slots=True, order=True)
class Tag:
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{TAG_PREFIX}{self.version}"

    @property
    def version(self) -> str:
        """Version without the tag prefix, as written in build descriptors."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def next_patch(self) -> Tag:
        return Tag(self.major, self.minor, self.patch + 1)


INITIAL_TAG = Tag(0, 0, 0)


def parse_tag(text: str) -> Result[Tag, MalformedTagError]:
    m = _TAG_RE.match(text.strip())
    if m is None:
        return Err(MalformedTagError(tag=text))
    return Ok(Tag(int(m.group(1)), int(m.group(2)), int(m.group(3))))


def latest_tag(history: Sequence[str]) -> str:
    """Most recent entry of an oldest-to-newest history, or the initial tag."""
    if not history:
        return str(INITIAL_TAG)
    return history[-1]


def compute_next_tag(history: Sequence[str]) -> Result[Tag, MalformedTagError]:
    """Next patch release after the most recent tag in history.

    Only the most recent tag is parsed; older entries are never inspected.
    An empty history starts from v0.0.0, so the first release is v0.0.1.
    """
    parsed = parse_tag(latest_tag(history))
    if isinstance(parsed, Err):
        return parsed
    return Ok(parsed.value.next_patch())
