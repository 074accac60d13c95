from __future__ import annotations

import os
from pathlib import Path

import typer

from reltag import __version__
from reltag.cli.commands.apply_cmd import apply
from reltag.cli.commands.next_cmd import next_tag
from reltag.cli.commands.release_cmd import release
from reltag.cli.context import CONFIG_ENV_VAR, ROOT_ENV_VAR
from reltag.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command("next")(next_tag)
app.command()(apply)
app.command()(release)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        is_eager=True,
        callback=_print_version,
        help="Show version and exit.",
    ),
    root_folder: Path | None = typer.Option(
        None,
        "--root-folder",
        help="Repository checkout to release (default: current directory).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: <root-folder>/reltag.toml).",
    ),
) -> None:
    del version
    if root_folder is not None:
        try:
            root = root_folder.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --root-folder: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --root-folder '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[ROOT_ENV_VAR] = str(root)

    if config is not None:
        os.environ[CONFIG_ENV_VAR] = str(config.expanduser().resolve())


def main() -> None:
    app()
