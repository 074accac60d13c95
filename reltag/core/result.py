"""Result type for explicit error handling.

Every operation that can fail for a reason the caller must handle (a malformed
tag, a missing descriptor, a rejected push) returns ``Ok(value)`` or
``Err(error)`` instead of raising.

Usage:
    match compute_next_tag(["v1.2.3"]):
        case Ok(tag):
            print(tag)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
