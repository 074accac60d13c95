"""Release tagging run.

One run walks the steps of ``RunState`` strictly in order:

1. read the latest reachable tag and derive the next patch tag
2. write the new version into the build descriptor
3. commit tracked changes (no-op when nothing changed)
4. create the annotated tag
5. push the branch, then all tags

A failing step stops the run. Earlier steps are not undone: a rejected push
leaves the local commit and tag in place for the operator to reconcile.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from reltag.core.result import Err, Ok, Result
from reltag.git.repository import GitIdentity
from reltag.output.console import ConsoleProtocol, Style
from reltag.release.context import (
    NO_COMMIT,
    CommitResult,
    ReleaseContext,
    ReleaseFailure,
    RunState,
)
from reltag.release.descriptor import FileSystem, apply_version, read_version
from reltag.release.errors import BranchUnknownError, ReleaseError
from reltag.release.tag import Tag, compute_next_tag, latest_tag
from reltag.release.vcs import VersionControl

BRANCH_ENV_VAR = "GITHUB_REF_NAME"


def version_message(tag: Tag) -> str:
    return f"Version {tag}"


def resolve_branch(
    vcs: VersionControl,
    *,
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Result[str, BranchUnknownError]:
    """Branch to push: explicit value, checked-out branch, then CI env var."""
    if explicit and explicit.strip():
        return Ok(explicit.strip())

    branch = vcs.current_branch()
    if branch:
        return Ok(branch)

    env = os.environ if environ is None else environ
    from_env = env.get(BRANCH_ENV_VAR, "").strip()
    if from_env:
        return Ok(from_env)
    return Err(BranchUnknownError())


@dataclass(frozen=True, slots=True)
class TaggerSettings:
    descriptor: Path
    key: str = "version"
    identity: GitIdentity = GitIdentity(
        name="release-bot",
        email="release-bot@users.noreply.github.com",
    )
    force_tag: bool = True
    dry_run: bool = False


class VersionTagger:
    """Computes, records and publishes the next release tag."""

    def __init__(
        self,
        *,
        vcs: VersionControl,
        fs: FileSystem,
        console: ConsoleProtocol,
        settings: TaggerSettings,
    ) -> None:
        self.vcs = vcs
        self.fs = fs
        self.console = console
        self.settings = settings

    def next_tag(self) -> Result[tuple[str, Tag], ReleaseError]:
        """Latest reachable tag (v0.0.0 when none) and the tag that follows it."""
        latest = self.vcs.read_latest_tag()
        if isinstance(latest, Err):
            return latest

        history = [latest.value] if latest.value is not None else []
        computed = compute_next_tag(history)
        if isinstance(computed, Err):
            return computed
        return Ok((latest_tag(history), computed.value))

    def apply_version(self, tag: Tag) -> Result[bool, ReleaseError]:
        """Rewrite the descriptor version. Ok(True) if the file changed."""
        path = self.settings.descriptor
        key = self.settings.key

        if self.settings.dry_run:
            current = read_version(self.fs, path, key=key)
            if isinstance(current, Err):
                return current
            changed = current.value != tag.version
            if changed:
                self.console.print(f"would set {key}={tag.version} in {path}", Style.DIM)
            return Ok(changed)

        applied = apply_version(self.fs, path, tag, key=key)
        if isinstance(applied, Ok):
            if applied.value:
                self.console.print(f"{path.name}: {key}={tag.version}", Style.DIM)
            else:
                self.console.print(f"{path.name}: already at {tag.version}", Style.DIM)
        return applied

    def commit_if_changed(self, tag: Tag) -> Result[CommitResult, ReleaseError]:
        """Commit tracked changes as the automation identity, if there are any."""
        message = version_message(tag)

        if self.settings.dry_run:
            self.console.print(f"git commit -a -m '{message}' (if changed)", Style.DIM)
            return Ok(NO_COMMIT)

        changes = self.vcs.has_changes()
        if isinstance(changes, Err):
            return changes
        if not changes.value:
            self.console.print("nothing to commit", Style.DIM)
            return Ok(NO_COMMIT)

        self.console.print(f"git commit -a -m '{message}'", Style.DIM)
        sha = self.vcs.commit(message, identity=self.settings.identity)
        if isinstance(sha, Err):
            return sha
        return Ok(CommitResult(committed=True, sha=sha.value))

    def create_tag(self, tag: Tag, message: str) -> Result[None, ReleaseError]:
        force = self.settings.force_tag
        flag = "-f " if force else ""
        self.console.print(f"git tag -a {flag}{tag} -m '{message}'", Style.DIM)
        if self.settings.dry_run:
            return Ok(None)
        return self.vcs.tag(str(tag), message, identity=self.settings.identity, force=force)

    def push(self, branch: str) -> Result[None, ReleaseError]:
        self.console.print(f"git push {branch} && git push --tags", Style.DIM)
        if self.settings.dry_run:
            return Ok(None)
        return self.vcs.push(branch, force_tags=self.settings.force_tag)

    def tag_and_push(
        self,
        tag: Tag,
        branch: str,
        message: str,
        *,
        on_tagged: Callable[[], None] | None = None,
    ) -> Result[None, ReleaseError]:
        """Create the annotated tag, then push the branch and all tags.

        ``on_tagged`` runs once the local tag exists, before anything is pushed.
        """
        tagged = self.create_tag(tag, message)
        if isinstance(tagged, Err):
            return tagged
        if on_tagged is not None:
            on_tagged()
        return self.push(branch)

    def run(self, context: ReleaseContext) -> Result[ReleaseContext, ReleaseFailure]:
        """Drive one release from START to DONE."""
        ctx = context

        def fail(error: ReleaseError) -> Err[ReleaseFailure]:
            return Err(
                ReleaseFailure(
                    error=error,
                    last_state=ctx.state,
                    context=ctx.advance(RunState.FAILED),
                )
            )

        computed = self.next_tag()
        if isinstance(computed, Err):
            return fail(computed.error)
        latest, new_tag = computed.value
        ctx = ctx.with_tags(latest, new_tag)
        self.console.print(f"latest tag: {latest}")
        self.console.print(f"new tag: {new_tag}")

        applied = self.apply_version(new_tag)
        if isinstance(applied, Err):
            return fail(applied.error)
        ctx = ctx.advance(RunState.DESCRIPTOR_UPDATED)

        commit = self.commit_if_changed(new_tag)
        if isinstance(commit, Err):
            return fail(commit.error)
        ctx = ctx.with_commit(commit.value)

        def mark_tagged() -> None:
            nonlocal ctx
            ctx = ctx.advance(RunState.TAGGED)

        published = self.tag_and_push(
            new_tag,
            ctx.branch_name,
            version_message(new_tag),
            on_tagged=mark_tagged,
        )
        if isinstance(published, Err):
            return fail(published.error)
        ctx = ctx.advance(RunState.PUSHED)

        return Ok(ctx.advance(RunState.DONE))
