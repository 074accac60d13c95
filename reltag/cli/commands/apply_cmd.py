from __future__ import annotations

from pathlib import Path

import typer

from reltag.cli.commands._helpers import exit_with_error
from reltag.cli.context import build_context
from reltag.core.result import Err
from reltag.release.tag import parse_tag


def apply(
    tag: str = typer.Option(..., "--tag", help="Tag to write, e.g. v1.2.4"),
    descriptor: Path | None = typer.Option(
        None,
        "--descriptor",
        help="Build descriptor (relative to the root folder).",
    ),
) -> None:
    """Write a tag's version into the build descriptor."""
    ctx = build_context()

    parsed = parse_tag(tag)
    if isinstance(parsed, Err):
        exit_with_error(parsed.error, ctx)

    result = ctx.tagger(descriptor=descriptor).apply_version(parsed.value)
    if isinstance(result, Err):
        exit_with_error(result.error, ctx)

    ctx.console.success(f"version {parsed.value.version}")
