from __future__ import annotations

from pathlib import Path

import typer

from reltag.cli.commands._helpers import exit_with_error, publish_outputs
from reltag.cli.context import build_context
from reltag.core.result import Err
from reltag.output.console import Style
from reltag.release.context import ReleaseContext
from reltag.release.tagger import resolve_branch


def release(
    branch: str | None = typer.Option(
        None,
        "--branch",
        help="Branch to push (default: checked-out branch, then $GITHUB_REF_NAME).",
    ),
    descriptor: Path | None = typer.Option(
        None,
        "--descriptor",
        help="Build descriptor (relative to the root folder).",
    ),
    output_file: Path | None = typer.Option(
        None,
        "--output-file",
        help="Append latest_tag/new_tag here (default: $GITHUB_OUTPUT).",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print actions without running them."),
) -> None:
    """Compute the next tag, bump the descriptor, commit, tag and push."""
    ctx = build_context()
    tagger = ctx.tagger(descriptor=descriptor, dry_run=dry_run)

    resolved = resolve_branch(tagger.vcs, explicit=branch)
    if isinstance(resolved, Err):
        exit_with_error(resolved.error, ctx)

    ctx.console.header(f"release {resolved.value}")
    result = tagger.run(ReleaseContext(root_folder=ctx.root, branch_name=resolved.value))
    if isinstance(result, Err):
        failure = result.error
        ctx.console.print(f"stopped after: {failure.last_state}", Style.DIM)
        exit_with_error(failure.error, ctx)

    done = result.value
    if not dry_run:
        publish_outputs(ctx, done.outputs(), output_file)
    ctx.console.success(f"released {done.new_tag}")
    typer.echo(str(done.new_tag))
