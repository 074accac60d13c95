"""Run outputs for downstream pipeline steps.

Written as ``key=value`` lines, the format GitHub Actions reads from the file
named by ``GITHUB_OUTPUT``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from reltag.platform.files import append_lines

OUTPUT_ENV_VAR = "GITHUB_OUTPUT"


def output_file(
    explicit: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    if explicit is not None:
        return explicit
    env = os.environ if environ is None else environ
    value = env.get(OUTPUT_ENV_VAR, "").strip()
    return Path(value) if value else None


def scan_outputs(scans: Mapping[str, bool]) -> dict[str, str]:
    """Scanner toggles, passed through untouched."""
    return {f"scan_{name}": "true" if enabled else "false" for name, enabled in scans.items()}


def format_outputs(values: Mapping[str, str]) -> list[str]:
    lines: list[str] = []
    for key, value in values.items():
        if "\n" in value or "\r" in value:
            raise ValueError(f"output {key} must be a single line")
        lines.append(f"{key}={value}")
    return lines


def write_outputs(path: Path, values: Mapping[str, str]) -> None:
    append_lines(path, format_outputs(values))
