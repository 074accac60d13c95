"""Error presentation and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reltag.core.errors import ErrorCode
from reltag.output.console import Style
from reltag.release.errors import (
    BranchUnknownError,
    DescriptorIOError,
    DescriptorNotFoundError,
    GitCommandError,
    MalformedTagError,
    PropertyNotFoundError,
    PushRejectedError,
    ReleaseError,
)

if TYPE_CHECKING:
    from reltag.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    match error:
        case MalformedTagError(tag=tag, hint=hint):
            console.error(f"malformed tag: {tag!r}")
            console.print(f"hint: {hint}", Style.DIM)
        case DescriptorNotFoundError(path=path):
            console.error(f"build descriptor not found: {path}")
        case DescriptorIOError(path=path, reason=reason):
            console.error(f"cannot access build descriptor {path}: {reason}")
        case PropertyNotFoundError(path=path, property=prop):
            console.error(f"no '{prop}' property in {path}")
        case BranchUnknownError(hint=hint):
            console.error("cannot determine the branch to push")
            console.print(f"hint: {hint}", Style.DIM)
        case GitCommandError(command=command, message=message, returncode=rc):
            console.error(f"git {command} failed (exit {rc})")
            if message:
                console.print(message, Style.DIM)
        case PushRejectedError(remote=remote, ref=ref, message=message, hint=hint):
            console.error(f"push of {ref} to {remote} rejected")
            if message:
                console.print(message, Style.DIM)
            console.print(f"hint: {hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error:
        case MalformedTagError():
            return int(ErrorCode.USER_ERROR)
        case DescriptorNotFoundError() | DescriptorIOError():
            return int(ErrorCode.IO_ERROR)
        case PropertyNotFoundError():
            return int(ErrorCode.DESCRIPTOR_ERROR)
        case BranchUnknownError() | GitCommandError():
            return int(ErrorCode.ENV_ERROR)
        case PushRejectedError():
            return int(ErrorCode.REMOTE_ERROR)
