"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Generator

import pytest


@dataclass
class SourceRepo:
    """A local git repository with two commits, used as a clone source."""

    path: Path
    first_commit: str
    second_commit: str

    @property
    def url(self) -> str:
        return str(self.path)


def _git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_repo(temp_dir: Path) -> SourceRepo:
    """Create a source repository.

    First commit: README.md ("v1") and docs/guide.txt.
    Second commit: README.md ("v2") and new.txt.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not found")

    path = temp_dir / "sources" / "project"
    path.mkdir(parents=True)
    _git("init", "-q", cwd=path)

    (path / "README.md").write_text("v1\n")
    (path / "docs").mkdir()
    (path / "docs" / "guide.txt").write_text("guide\n")
    _git("add", "-A", cwd=path)
    _git("commit", "-q", "-m", "first", cwd=path)
    first = _git("rev-parse", "HEAD", cwd=path)

    (path / "README.md").write_text("v2\n")
    (path / "new.txt").write_text("new\n")
    _git("add", "-A", cwd=path)
    _git("commit", "-q", "-m", "second", cwd=path)
    second = _git("rev-parse", "HEAD", cwd=path)

    return SourceRepo(path=path, first_commit=first, second_commit=second)


@pytest.fixture
def work_dir(temp_dir: Path) -> Path:
    """Working directory the packer clones and archives into."""
    path = temp_dir / "work"
    path.mkdir()
    return path


# Markers for test categories
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests requiring the git executable")
