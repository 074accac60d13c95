from __future__ import annotations

import pytest

from reltag.output.console import MockConsole, RichConsole, Style


def test_mock_console_records_styles() -> None:
    console = MockConsole()

    console.print("git tag -a v1.0.1", Style.DIM)
    console.success("released v1.0.1")
    console.warning("dry run")
    console.error("boom")
    console.header("release main")

    assert console.messages == [
        "git tag -a v1.0.1",
        "OK released v1.0.1",
        "warning: dry run",
        "error: boom",
        "release main",
    ]
    assert console.has_error()
    assert console.count(Style.DIM) == 1


def test_rich_console_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    console = RichConsole()

    console.print("new tag: v1.0.1")
    console.error("boom [x]")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "new tag: v1.0.1" in captured.err
    assert "error:" in captured.err
    assert "boom [x]" in captured.err
