"""Release versioning: tag arithmetic, descriptor rewrite, commit, tag and push."""

from __future__ import annotations

from reltag.release.context import CommitResult, ReleaseContext, ReleaseFailure, RunState
from reltag.release.descriptor import FileSystem, LocalFileSystem, apply_version, read_version
from reltag.release.errors import (
    BranchUnknownError,
    DescriptorIOError,
    DescriptorNotFoundError,
    GitCommandError,
    MalformedTagError,
    PropertyNotFoundError,
    PushRejectedError,
    ReleaseError,
)
from reltag.release.tag import Tag, compute_next_tag, parse_tag
from reltag.release.tagger import TaggerSettings, VersionTagger, resolve_branch
from reltag.release.vcs import GitVersionControl, VersionControl

__all__ = [
    # model
    "CommitResult",
    "ReleaseContext",
    "ReleaseFailure",
    "RunState",
    "Tag",
    "compute_next_tag",
    "parse_tag",
    # descriptor
    "FileSystem",
    "LocalFileSystem",
    "apply_version",
    "read_version",
    # errors
    "BranchUnknownError",
    "DescriptorIOError",
    "DescriptorNotFoundError",
    "GitCommandError",
    "MalformedTagError",
    "PropertyNotFoundError",
    "PushRejectedError",
    "ReleaseError",
    # run
    "GitVersionControl",
    "TaggerSettings",
    "VersionControl",
    "VersionTagger",
    "resolve_branch",
]
