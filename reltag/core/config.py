"""Typed configuration loading.

The config file is optional. When present it is a TOML document:

    [descriptor]
    path = "build.properties"
    property = "version"

    [git]
    remote = "origin"
    force_tag = true

    [identity]
    name = "release-bot"
    email = "release-bot@users.noreply.github.com"

    [scans]
    sonar = true
    codeql = false

Scan toggles are not interpreted here; they are handed to downstream steps.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, bool_items, get_bool, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "DescriptorConfig",
    "GitConfig",
    "IdentityConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "reltag.toml"

DEFAULT_DESCRIPTOR_PATH = "build.properties"
DEFAULT_VERSION_PROPERTY = "version"
DEFAULT_REMOTE = "origin"
DEFAULT_IDENTITY_NAME = "release-bot"
DEFAULT_IDENTITY_EMAIL = "release-bot@users.noreply.github.com"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class DescriptorConfig:
    """Build descriptor location, relative to the root folder."""

    path: str = DEFAULT_DESCRIPTOR_PATH
    property: str = DEFAULT_VERSION_PROPERTY


@dataclass(frozen=True, slots=True)
class GitConfig:
    remote: str = DEFAULT_REMOTE
    force_tag: bool = True


@dataclass(frozen=True, slots=True)
class IdentityConfig:
    """Author of release commits and tags."""

    name: str = DEFAULT_IDENTITY_NAME
    email: str = DEFAULT_IDENTITY_EMAIL


def _no_scans() -> dict[str, bool]:
    return {}


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    descriptor: DescriptorConfig = field(default_factory=DescriptorConfig)
    git: GitConfig = field(default_factory=GitConfig)
    identity: IdentityConfig = field(default_factory=IdentityConfig)
    scans: dict[str, bool] = field(default_factory=_no_scans)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML."""
        descriptor: StrDict = get_table(data, "descriptor") or {}
        git: StrDict = get_table(data, "git") or {}
        identity: StrDict = get_table(data, "identity") or {}
        scans: StrDict = get_table(data, "scans") or {}

        force_tag = get_bool(git, "force_tag")

        return cls(
            descriptor=DescriptorConfig(
                path=get_str(descriptor, "path") or DEFAULT_DESCRIPTOR_PATH,
                property=get_str(descriptor, "property") or DEFAULT_VERSION_PROPERTY,
            ),
            git=GitConfig(
                remote=get_str(git, "remote") or DEFAULT_REMOTE,
                force_tag=True if force_tag is None else force_tag,
            ),
            identity=IdentityConfig(
                name=get_str(identity, "name") or DEFAULT_IDENTITY_NAME,
                email=get_str(identity, "email") or DEFAULT_IDENTITY_EMAIL,
            ),
            scans=bool_items(scans),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, defaults otherwise.

    An existing but invalid file is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
