"""Run-scoped release state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from reltag.release.errors import ReleaseError
from reltag.release.tag import Tag


class RunState(Enum):
    """Steps of one release run, in order.

    START -> TAG_COMPUTED -> DESCRIPTOR_UPDATED -> COMMITTED | UNCHANGED
    -> TAGGED -> PUSHED -> DONE. Any failure ends in FAILED.
    """

    START = "start"
    TAG_COMPUTED = "tag_computed"
    DESCRIPTOR_UPDATED = "descriptor_updated"
    COMMITTED = "committed"
    UNCHANGED = "unchanged"
    TAGGED = "tagged"
    PUSHED = "pushed"
    DONE = "done"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class CommitResult:
    committed: bool
    sha: str | None = None


NO_COMMIT = CommitResult(committed=False)


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """State owned by a single run.

    new_tag is set once at TAG_COMPUTED and never replaced afterwards.
    """

    root_folder: Path
    branch_name: str
    latest_tag: str | None = None
    new_tag: Tag | None = None
    state: RunState = RunState.START
    commit: CommitResult | None = None

    def advance(self, state: RunState) -> ReleaseContext:
        return replace(self, state=state)

    def with_tags(self, latest_tag: str, new_tag: Tag) -> ReleaseContext:
        if self.new_tag is not None:
            raise ValueError(f"new tag already computed for this run: {self.new_tag}")
        return replace(
            self,
            latest_tag=latest_tag,
            new_tag=new_tag,
            state=RunState.TAG_COMPUTED,
        )

    def with_commit(self, commit: CommitResult) -> ReleaseContext:
        state = RunState.COMMITTED if commit.committed else RunState.UNCHANGED
        return replace(self, commit=commit, state=state)

    def outputs(self) -> dict[str, str]:
        """Values handed to downstream pipeline steps."""
        out: dict[str, str] = {}
        if self.latest_tag is not None:
            out["latest_tag"] = self.latest_tag
        if self.new_tag is not None:
            out["new_tag"] = str(self.new_tag)
        return out


@dataclass(frozen=True, slots=True)
class ReleaseFailure:
    """Why a run stopped and which step it had completed last."""

    error: ReleaseError
    last_state: RunState
    context: ReleaseContext
