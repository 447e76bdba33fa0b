"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog

from ghlink.config.settings import get_settings


def run_git(repo_path: Path, *args: str) -> str:
    """Run a git command in ``repo_path`` and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def init_repo(repo_path: Path) -> Path:
    """Initialise an empty repository with a committer identity."""
    repo_path.mkdir(parents=True, exist_ok=True)
    run_git(repo_path, "init")
    run_git(repo_path, "config", "user.email", "test@test.com")
    run_git(repo_path, "config", "user.name", "Test")
    run_git(repo_path, "config", "commit.gpgsign", "false")
    return repo_path


def commit_all(repo_path: Path, message: str = "Initial commit") -> str:
    """Commit everything in the work tree and return the new HEAD."""
    run_git(repo_path, "add", ".")
    run_git(repo_path, "commit", "-m", message)
    return run_git(repo_path, "rev-parse", "HEAD")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with an origin remote and one commit."""
    repo_path = init_repo(tmp_path / "test-repo")
    run_git(repo_path, "remote", "add", "origin", "git@github.com:org/repo.git")

    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "guide.md").write_text(
        "# Guide\n\nUsage:\n\n    ghlink file\n\nMore text.\n"
    )
    (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")
    (repo_path / "src").mkdir()
    (repo_path / "src" / "main.py").write_text(
        "import sys\n\n\ndef main():\n    print('hello')\n    return 0\n\n\nsys.exit(main())\n"
    )

    commit_all(repo_path)
    return repo_path


@pytest.fixture
def head(git_repo: Path) -> str:
    """Full HEAD commit of ``git_repo``."""
    return run_git(git_repo, "rev-parse", "HEAD")


@pytest.fixture
def text_file(tmp_path: Path):
    """Factory writing a text file and returning its path."""

    def _write(content: str, name: str = "sample.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
