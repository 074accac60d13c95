from __future__ import annotations

from reltag.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert [int(c) for c in ErrorCode] == [0, 1, 2, 3, 4, 5]


def test_str() -> None:
    assert str(ErrorCode.REMOTE_ERROR) == "remote error"
