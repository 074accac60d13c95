"""Subprocess execution returning Result values.

Usage:
    match run(["git", "describe", "--tags"], cwd=root, timeout=30.0):
        case Ok(stdout):
            ...
        case Err(error):
            print(error.stderr)
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from reltag.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be started or exited non-zero.

    Attributes:
        command: The command line.
        returncode: Exit code, -1 when the process never ran or timed out.
        stdout: Captured standard output.
        stderr: Captured standard error, or the OS / timeout message.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Run a command and capture its output.

    Args:
        cmd: Command and arguments.
        cwd: Working directory.
        env: Environment (inherits the current one if None).
        timeout: Seconds before the command is killed (None for no limit).

    Returns:
        Ok(stdout) on exit 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)
