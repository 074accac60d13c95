from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from reltag.core.config import CONFIG_FILE_NAME, Config, load_config, load_config_or_default
from reltag.core.errors import ErrorCode
from reltag.core.result import Err
from reltag.git.repository import GitIdentity, Repository
from reltag.output.console import ConsoleProtocol, RichConsole
from reltag.release.descriptor import LocalFileSystem
from reltag.release.tagger import TaggerSettings, VersionTagger
from reltag.release.vcs import GitVersionControl

ROOT_ENV_VAR = "RELTAG_ROOT"
CONFIG_ENV_VAR = "RELTAG_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    console: ConsoleProtocol

    def descriptor_path(self, override: Path | None = None) -> Path:
        path = override if override is not None else Path(self.config.descriptor.path)
        return path if path.is_absolute() else self.root / path

    def tagger(self, *, descriptor: Path | None = None, dry_run: bool = False) -> VersionTagger:
        cfg = self.config
        return VersionTagger(
            vcs=GitVersionControl(Repository(self.root), remote=cfg.git.remote),
            fs=LocalFileSystem(),
            console=self.console,
            settings=TaggerSettings(
                descriptor=self.descriptor_path(descriptor),
                key=cfg.descriptor.property,
                identity=GitIdentity(name=cfg.identity.name, email=cfg.identity.email),
                force_tag=cfg.git.force_tag,
                dry_run=dry_run,
            ),
        )


def build_context() -> CLIContext:
    root = Path(os.environ.get(ROOT_ENV_VAR) or Path.cwd())
    explicit = os.environ.get(CONFIG_ENV_VAR)
    # an explicit --config must exist; the implicit reltag.toml is optional
    if explicit:
        config_result = load_config(Path(explicit))
    else:
        config_result = load_config_or_default(root / CONFIG_FILE_NAME)

    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(root=root, config=config_result.value, console=RichConsole())
