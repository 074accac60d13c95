"""Version-control port used by the tagger, and its git adapter."""

from __future__ import annotations

from typing import Protocol

from reltag.core.result import Err, Ok, Result
from reltag.git.repository import GitError, GitIdentity, Repository
from reltag.release.errors import GitCommandError, PushRejectedError, ReleaseError


class VersionControl(Protocol):
    def read_latest_tag(self) -> Result[str | None, ReleaseError]:
        """Most recent tag reachable from HEAD, None when there is none."""
        ...

    def current_branch(self) -> str | None: ...

    def has_changes(self) -> Result[bool, ReleaseError]:
        """True if tracked files differ from HEAD."""
        ...

    def commit(self, message: str, *, identity: GitIdentity) -> Result[str, ReleaseError]: ...

    def tag(
        self,
        name: str,
        message: str,
        *,
        identity: GitIdentity,
        force: bool,
    ) -> Result[None, ReleaseError]: ...

    def push(self, branch: str, *, force_tags: bool) -> Result[None, ReleaseError]:
        """Push branch, then all tags."""
        ...


def _command_error(e: GitError) -> GitCommandError:
    return GitCommandError(command=e.command, message=e.message, returncode=e.returncode)


class GitVersionControl:
    def __init__(self, repo: Repository, *, remote: str = "origin") -> None:
        self.repo = repo
        self.remote = remote

    def read_latest_tag(self) -> Result[str | None, ReleaseError]:
        result = self.repo.latest_tag()
        if isinstance(result, Err):
            return Err(_command_error(result.error))
        return Ok(result.value)

    def current_branch(self) -> str | None:
        return self.repo.current_branch()

    def has_changes(self) -> Result[bool, ReleaseError]:
        result = self.repo.status()
        if isinstance(result, Err):
            return Err(_command_error(result.error))
        return Ok(not result.value.is_clean)

    def commit(self, message: str, *, identity: GitIdentity) -> Result[str, ReleaseError]:
        result = self.repo.commit_tracked(message, identity=identity)
        if isinstance(result, Err):
            return Err(_command_error(result.error))
        return Ok(result.value)

    def tag(
        self,
        name: str,
        message: str,
        *,
        identity: GitIdentity,
        force: bool,
    ) -> Result[None, ReleaseError]:
        result = self.repo.tag_annotated(name, message, identity=identity, force=force)
        if isinstance(result, Err):
            return Err(_command_error(result.error))
        return Ok(None)

    def push(self, branch: str, *, force_tags: bool) -> Result[None, ReleaseError]:
        pushed = self.repo.push_branch(self.remote, branch)
        if isinstance(pushed, Err):
            return Err(self._push_error(pushed.error, ref=branch))

        tags = self.repo.push_tags(self.remote, force=force_tags)
        if isinstance(tags, Err):
            return Err(self._push_error(tags.error, ref="tags"))
        return Ok(None)

    def _push_error(self, e: GitError, *, ref: str) -> ReleaseError:
        if e.is_rejected:
            return PushRejectedError(remote=self.remote, ref=ref, message=e.message)
        return _command_error(e)
