"""Tests for reltag.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from reltag.core.config import (
    Config,
    DescriptorConfig,
    GitConfig,
    IdentityConfig,
    load_config,
    load_config_or_default,
)
from reltag.core.result import Err, Ok


class TestDefaults:
    def test_config_defaults(self) -> None:
        config = Config()
        assert config.descriptor == DescriptorConfig(path="build.properties", property="version")
        assert config.git == GitConfig(remote="origin", force_tag=True)
        assert config.identity.name == "release-bot"
        assert config.scans == {}

    def test_frozen(self) -> None:
        config = GitConfig()
        with pytest.raises(AttributeError):
            config.remote = "upstream"  # type: ignore[misc]


class TestFromDict:
    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "descriptor": {"path": "ant/build.properties", "property": "app.version"},
                "git": {"remote": "upstream", "force_tag": False},
                "identity": {"name": "ci", "email": "ci@example.com"},
                "scans": {"sonar": True, "codeql": False, "url": "https://sonar"},
            }
        )
        assert config.descriptor == DescriptorConfig(
            path="ant/build.properties", property="app.version"
        )
        assert config.git == GitConfig(remote="upstream", force_tag=False)
        assert config.identity == IdentityConfig(name="ci", email="ci@example.com")
        assert config.scans == {"sonar": True, "codeql": False}

    def test_empty_and_blank_values_fall_back(self) -> None:
        config = Config.from_dict({"descriptor": {"path": "  "}, "git": {"force_tag": "yes"}})
        assert config.descriptor.path == "build.properties"
        assert config.git.force_tag is True

    def test_non_table_sections_ignored(self) -> None:
        assert Config.from_dict({"git": "origin"}) == Config()


class TestLoadConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "reltag.toml"
        path.write_text('[descriptor]\npath = "version.properties"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.descriptor.path == "version.properties"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "reltag.toml"
        path.write_text("[descriptor\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_or_default_when_missing(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Ok(Config())

    def test_or_default_still_reports_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "reltag.toml"
        path.write_text("not toml at all [", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)
