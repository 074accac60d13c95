"""Git repository abstraction.

All operations shell out to ``git -C <path>`` and return Result values.

Usage:
    repo = Repository(Path("/path/to/checkout"))

    match repo.latest_tag():
        case Ok(None):
            print("no tags yet")
        case Ok(tag):
            print(f"latest: {tag}")
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from reltag.core.result import Err, Ok, Result
from reltag.platform.process import ProcessError
from reltag.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0

# stderr fragments git prints when the remote refuses a non-fast-forward update
_REJECTED_MARKERS = (
    "[rejected]",
    "non-fast-forward",
    "fetch first",
    "would clobber existing tag",
)

# stderr fragments of `git describe` when no tag is reachable
_NO_TAG_MARKERS = ("No names found", "No tags can describe", "cannot describe")

__all__ = [
    "GitError",
    "GitIdentity",
    "GitStatus",
    "Repository",
    "StatusEntry",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message (stderr when available)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1

    @property
    def is_rejected(self) -> bool:
        """True if the remote refused the push because it has diverged."""
        return any(marker in self.message for marker in _REJECTED_MARKERS)


@dataclass(frozen=True, slots=True)
class GitIdentity:
    """Author/committer identity passed via ``-c user.*``."""

    name: str
    email: str

    def config_args(self) -> list[str]:
        return ["-c", f"user.name={self.name}", "-c", f"user.email={self.email}"]


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single `git status --porcelain` line.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M")
        path: File path
    """

    xy: str
    path: str


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Tracked changes of a working tree."""

    entries: tuple[StatusEntry, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        return len(self.entries) == 0


class Repository:
    """A local git checkout.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def status(self) -> Result[GitStatus, GitError]:
        """Status of tracked files (untracked files are ignored).

        Runs `git status --porcelain=v1 --untracked-files=no`.
        """
        result = self._run(["status", "--porcelain=v1", "--untracked-files=no"])
        match result:
            case Err(e):
                return Err(_git_error("status", e))
            case Ok(stdout):
                return Ok(_parse_status(stdout))

    def current_branch(self) -> str | None:
        """Current branch name, None on detached HEAD or error."""
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        match result:
            case Ok(stdout):
                branch = stdout.strip()
                return None if branch in ("HEAD", "") else branch
            case Err(_):
                return None

    def head_sha(self) -> Result[str, GitError]:
        result = self._run(["rev-parse", "HEAD"])
        match result:
            case Err(e):
                return Err(_git_error("rev-parse", e))
            case Ok(stdout):
                return Ok(stdout.strip())

    def latest_tag(self) -> Result[str | None, GitError]:
        """Most recent tag reachable from HEAD, None if there is none.

        Runs `git describe --tags --abbrev=0`.
        """
        result = self._run(["describe", "--tags", "--abbrev=0"])
        match result:
            case Err(e):
                if any(marker in e.stderr for marker in _NO_TAG_MARKERS):
                    return Ok(None)
                return Err(_git_error("describe", e))
            case Ok(stdout):
                return Ok(stdout.strip() or None)

    def commit_tracked(self, message: str, *, identity: GitIdentity) -> Result[str, GitError]:
        """Commit every modified tracked file and return the new HEAD sha."""
        result = self._run(["commit", "-a", "-m", message], identity=identity)
        if isinstance(result, Err):
            return Err(_git_error("commit", result.error))
        return self.head_sha()

    def tag_annotated(
        self,
        name: str,
        message: str,
        *,
        identity: GitIdentity,
        force: bool,
    ) -> Result[None, GitError]:
        """Create an annotated tag on HEAD (`-f` replaces an existing one)."""
        args = ["tag", "-a", name, "-m", message]
        if force:
            args.insert(1, "-f")
        result = self._run(args, identity=identity)
        if isinstance(result, Err):
            return Err(_git_error("tag", result.error))
        return Ok(None)

    def push_branch(self, remote: str, branch: str) -> Result[None, GitError]:
        result = self._run(["push", remote, f"HEAD:refs/heads/{branch}"])
        if isinstance(result, Err):
            return Err(_git_error("push", result.error))
        return Ok(None)

    def push_tags(self, remote: str, *, force: bool) -> Result[None, GitError]:
        """Push all tags. With force, moved tags overwrite the remote ones."""
        args = ["push", remote, "--tags"]
        if force:
            args.append("--force")
        result = self._run(args)
        if isinstance(result, Err):
            return Err(_git_error("push --tags", result.error))
        return Ok(None)

    def _run(
        self,
        args: list[str],
        *,
        identity: GitIdentity | None = None,
    ) -> Result[str, ProcessError]:
        command = args[0] if args else ""
        timeout = (
            _GIT_NETWORK_TIMEOUT_SECONDS
            if command in {"fetch", "pull", "push"}
            else _GIT_TIMEOUT_SECONDS
        )
        prefix = identity.config_args() if identity is not None else []
        return run_process(
            ["git", *prefix, "-C", str(self.path), *args],
            cwd=self.path,
            timeout=timeout,
        )


def _git_error(command: str, e: ProcessError) -> GitError:
    return GitError(
        command=command,
        message=e.stderr.strip() or e.stdout.strip() or f"git {command} failed",
        returncode=e.returncode,
    )


def _parse_status(output: str) -> GitStatus:
    entries = tuple(
        StatusEntry(xy=ln[:2], path=ln[3:]) for ln in output.splitlines() if len(ln) >= 4
    )
    return GitStatus(entries=entries)
