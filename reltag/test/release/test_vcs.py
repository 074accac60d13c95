from __future__ import annotations

from pathlib import Path

from reltag.core.result import Err, Ok, Result
from reltag.git.repository import GitError, GitStatus, Repository, StatusEntry
from reltag.release.errors import GitCommandError, PushRejectedError
from reltag.release.vcs import GitVersionControl


class StubRepository(Repository):
    def __init__(self) -> None:
        super().__init__(Path("/repo"))
        self.status_result: Result[GitStatus, GitError] = Ok(GitStatus())
        self.branch_push: Result[None, GitError] = Ok(None)
        self.tags_push: Result[None, GitError] = Ok(None)
        self.pushed: list[tuple[str, str]] = []

    def status(self) -> Result[GitStatus, GitError]:
        return self.status_result

    def push_branch(self, remote: str, branch: str) -> Result[None, GitError]:
        self.pushed.append((remote, branch))
        return self.branch_push

    def push_tags(self, remote: str, *, force: bool) -> Result[None, GitError]:
        self.pushed.append((remote, "--tags"))
        return self.tags_push


def test_has_changes_follows_status() -> None:
    repo = StubRepository()
    vcs = GitVersionControl(repo)
    assert vcs.has_changes() == Ok(False)

    repo.status_result = Ok(
        GitStatus(entries=(StatusEntry(xy=" M", path="build.properties"),))
    )
    assert vcs.has_changes() == Ok(True)


def test_git_failure_becomes_command_error() -> None:
    repo = StubRepository()
    repo.status_result = Err(GitError(command="status", message="boom", returncode=128))

    assert GitVersionControl(repo).has_changes() == Err(
        GitCommandError(command="status", message="boom", returncode=128)
    )


def test_push_sends_branch_then_tags() -> None:
    repo = StubRepository()

    assert GitVersionControl(repo, remote="upstream").push("main", force_tags=True) == Ok(None)
    assert repo.pushed == [("upstream", "main"), ("upstream", "--tags")]


def test_rejected_branch_push() -> None:
    repo = StubRepository()
    repo.branch_push = Err(
        GitError(command="push", message=" ! [rejected] main -> main (fetch first)")
    )

    result = GitVersionControl(repo).push("main", force_tags=True)

    assert isinstance(result, Err)
    assert isinstance(result.error, PushRejectedError)
    assert result.error.ref == "main"
    assert repo.pushed == [("origin", "main")]


def test_rejected_tag_push() -> None:
    repo = StubRepository()
    clobber = " ! [rejected] v1.0.1 -> v1.0.1 (would clobber existing tag)"
    repo.tags_push = Err(GitError(command="push --tags", message=clobber))

    result = GitVersionControl(repo).push("main", force_tags=False)

    assert isinstance(result, Err)
    assert result.error == PushRejectedError(remote="origin", ref="tags", message=clobber)


def test_other_push_failure_is_command_error() -> None:
    repo = StubRepository()
    repo.branch_push = Err(GitError(command="push", message="fatal: Authentication failed"))

    result = GitVersionControl(repo).push("main", force_tags=True)

    assert isinstance(result, Err)
    assert isinstance(result.error, GitCommandError)
