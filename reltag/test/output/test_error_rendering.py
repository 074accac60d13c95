from __future__ import annotations

from pathlib import Path

import pytest

from reltag.core.errors import ErrorCode
from reltag.output.console import MockConsole, Style
from reltag.output.errors import print_release_error, release_error_exit_code
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


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MalformedTagError(tag="release-1"), ErrorCode.USER_ERROR),
        (DescriptorNotFoundError(path=Path("build.properties")), ErrorCode.IO_ERROR),
        (DescriptorIOError(path=Path("build.properties"), reason="denied"), ErrorCode.IO_ERROR),
        (
            PropertyNotFoundError(path=Path("build.properties"), property="version"),
            ErrorCode.DESCRIPTOR_ERROR,
        ),
        (BranchUnknownError(), ErrorCode.ENV_ERROR),
        (GitCommandError(command="tag", message="x"), ErrorCode.ENV_ERROR),
        (PushRejectedError(remote="origin", ref="main", message="x"), ErrorCode.REMOTE_ERROR),
    ],
)
def test_exit_codes(error: ReleaseError, code: ErrorCode) -> None:
    assert release_error_exit_code(error) == int(code)


def test_malformed_tag_has_hint() -> None:
    console = MockConsole()

    print_release_error(MalformedTagError(tag="release-1"), console)

    assert console.messages[0] == "error: malformed tag: 'release-1'"
    assert console.outputs[1].style == Style.DIM
    assert "vMAJOR.MINOR.PATCH" in console.messages[1]


def test_push_rejected_mentions_manual_reconcile() -> None:
    console = MockConsole()

    print_release_error(
        PushRejectedError(remote="origin", ref="main", message="! [rejected] main -> main"),
        console,
    )

    assert console.has_error()
    assert console.find("push of main to origin rejected")
    assert console.find("Reconcile manually")


def test_property_not_found() -> None:
    console = MockConsole()

    print_release_error(
        PropertyNotFoundError(path=Path("build.properties"), property="version"), console
    )

    assert console.text == "error: no 'version' property in build.properties"
    assert console.count(Style.ERROR) == 1
