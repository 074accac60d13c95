from __future__ import annotations

from pathlib import Path

import typer

from reltag.cli.commands._helpers import exit_with_error, publish_outputs
from reltag.cli.context import build_context
from reltag.core.result import Err


def next_tag(
    output_file: Path | None = typer.Option(
        None,
        "--output-file",
        help="Append latest_tag/new_tag here (default: $GITHUB_OUTPUT).",
    ),
) -> None:
    """Print the next release tag without changing anything."""
    ctx = build_context()
    result = ctx.tagger().next_tag()
    if isinstance(result, Err):
        exit_with_error(result.error, ctx)

    latest, new_tag = result.value
    publish_outputs(ctx, {"latest_tag": latest, "new_tag": str(new_tag)}, output_file)
    typer.echo(str(new_tag))
