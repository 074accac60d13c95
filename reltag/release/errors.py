"""Release failure types.

Each failure is a frozen value carried inside ``Err``; nothing here is raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MalformedTagError:
    tag: str
    hint: str = "Expected vMAJOR.MINOR.PATCH, e.g. v1.2.3"


@dataclass(frozen=True, slots=True)
class DescriptorNotFoundError:
    path: Path


@dataclass(frozen=True, slots=True)
class DescriptorIOError:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class PropertyNotFoundError:
    path: Path
    property: str


@dataclass(frozen=True, slots=True)
class BranchUnknownError:
    hint: str = "Check out a branch, pass --branch, or set GITHUB_REF_NAME."


@dataclass(frozen=True, slots=True)
class GitCommandError:
    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class PushRejectedError:
    remote: str
    ref: str
    message: str
    hint: str = "Remote has diverged; local commit and tag were kept. Reconcile manually."


ReleaseError = (
    MalformedTagError
    | DescriptorNotFoundError
    | DescriptorIOError
    | PropertyNotFoundError
    | BranchUnknownError
    | GitCommandError
    | PushRejectedError
)
