from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

_IDENTITY = ["-c", "user.name=tester", "-c", "user.email=tester@example.com"]


class GitSandbox:
    """A working clone with a local bare repository as its origin."""

    def __init__(self, root: Path) -> None:
        self.remote = root / "remote.git"
        self.work = root / "work"

        self.remote.mkdir()
        self.git(self.remote, "init", "-q", "--bare")
        self.git(self.remote, "symbolic-ref", "HEAD", "refs/heads/main")

        self.work.mkdir()
        self.git(self.work, "init", "-q")
        self.git(self.work, "symbolic-ref", "HEAD", "refs/heads/main")
        self.git(self.work, "remote", "add", "origin", str(self.remote))

    @property
    def descriptor(self) -> Path:
        return self.work / "build.properties"

    def git(self, cwd: Path, *args: str) -> str:
        proc = subprocess.run(
            ["git", *_IDENTITY, *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=True,
        )
        return proc.stdout.strip()

    def commit_descriptor(self, content: str, *, tag: str | None = None) -> None:
        self.descriptor.write_text(content, encoding="utf-8")
        self.git(self.work, "add", "build.properties")
        self.git(self.work, "commit", "-q", "-m", "descriptor")
        if tag is not None:
            self.git(self.work, "tag", tag)
        self.git(self.work, "push", "-q", "origin", "main", "--tags")

    def remote_commit(self, clone_dir: Path) -> None:
        """Advance origin/main from another clone so local pushes diverge."""
        self.git(clone_dir.parent, "clone", "-q", str(self.remote), clone_dir.name)
        (clone_dir / "NOTES").write_text("elsewhere\n", encoding="utf-8")
        self.git(clone_dir, "add", "NOTES")
        self.git(clone_dir, "commit", "-q", "-m", "elsewhere")
        self.git(clone_dir, "push", "-q", "origin", "main")


@pytest.fixture
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GitSandbox:
    if shutil.which("git") is None:
        pytest.skip("git not available")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.delenv("GIT_CONFIG_GLOBAL", raising=False)
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    monkeypatch.delenv("GITHUB_REF_NAME", raising=False)
    return GitSandbox(tmp_path)
