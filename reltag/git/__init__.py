"""Git operations.

Usage:
    from reltag.git import Repository

    repo = Repository(Path("/path/to/checkout"))
    branch = repo.current_branch()
"""

from reltag.git.repository import (
    GitError,
    GitIdentity,
    GitStatus,
    Repository,
    StatusEntry,
)

__all__ = [
    "GitError",
    "GitIdentity",
    "GitStatus",
    "Repository",
    "StatusEntry",
]
