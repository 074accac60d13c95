"""Shared helpers for CLI commands."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from reltag.output.errors import print_release_error, release_error_exit_code
from reltag.release.errors import ReleaseError
from reltag.release.outputs import output_file, scan_outputs, write_outputs

if TYPE_CHECKING:
    from reltag.cli.context import CLIContext


def exit_with_error(error: ReleaseError, ctx: CLIContext) -> NoReturn:
    print_release_error(error, ctx.console)
    raise typer.Exit(code=release_error_exit_code(error))


def publish_outputs(ctx: CLIContext, values: Mapping[str, str], explicit: Path | None) -> None:
    """Write run outputs (plus scan toggles) where downstream steps read them."""
    target = output_file(explicit)
    if target is None:
        return
    write_outputs(target, {**values, **scan_outputs(ctx.config.scans)})
