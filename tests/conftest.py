"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Optional

import pytest


@pytest.fixture(autouse=True)
def isolated_registry(tmp_path, monkeypatch):
    """Point the registry at a temporary file so tests never touch ~/.cps."""
    registry_path = tmp_path / "registry" / "projects.json"
    monkeypatch.setenv("CPS_CONFIG_PATH", str(registry_path))
    yield registry_path


@pytest.fixture
def workspace(tmp_path):
    """A resolved directory to build fake repositories in."""
    path = (tmp_path / "workspace").resolve()
    path.mkdir()
    return path


@pytest.fixture
def make_repo():
    """Factory creating directories that look like git repository roots."""

    def _make_repo(path: Path, remote: Optional[str] = None) -> Path:
        git_dir = path / ".git"
        git_dir.mkdir(parents=True)
        if remote:
            (git_dir / "config").write_text(
                "[core]\n"
                "\trepositoryformatversion = 0\n"
                '[remote "origin"]\n'
                f"\turl = {remote}\n"
                "\tfetch = +refs/heads/*:refs/remotes/origin/*\n"
            )
        return path

    return _make_repo
