"""Shared test fixtures for stageguard."""

import os
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

GitRunner = Callable[..., str]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop guard settings inherited from the developer's shell."""
    for name in list(os.environ):
        if name.startswith("STAGEGUARD_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate git from global config and parent repositories."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")


@pytest.fixture
def repo_dir(tmp_path: Path, git_env: None) -> Path:
    """Create an empty git working tree."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo, check=True)
    return repo


@pytest.fixture
def git(repo_dir: Path) -> GitRunner:
    """Run git commands inside ``repo_dir``."""

    def _run(*args: str) -> str:
        result = subprocess.run(
            ["git", *args],
            cwd=repo_dir,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    return _run


@pytest.fixture
def stage(repo_dir: Path, git: GitRunner) -> Callable[..., None]:
    """Write files into the repository and stage them."""

    def _stage(*paths: str) -> None:
        for rel in paths:
            target = repo_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"contents of {rel}\n")
        git("add", "--", *paths)

    return _stage
