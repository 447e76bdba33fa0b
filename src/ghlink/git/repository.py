"""Git repository access using subprocess."""

import subprocess
from pathlib import Path

import structlog

from ghlink.core.exceptions import GitUnavailableError

logger = structlog.get_logger(__name__)


class GitRepository:
    """Read-only handle on a git work tree.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, root: Path, git_executable: str = "git") -> None:
        self._repo_path = Path(root)
        self._git = git_executable

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                [self._git, *args],
                cwd=self._repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
                check=True,
            )
        except OSError as e:
            raise GitUnavailableError(
                f"cannot run git executable {self._git}: {e}",
                details={"git_executable": self._git},
            ) from e
        return result.stdout.strip()

    def is_git_repo(self) -> bool:
        """Check if the path is a valid git repository."""
        try:
            self._run_git("rev-parse", "--git-dir")
            return True
        except subprocess.CalledProcessError:
            return False

    def get_work_tree(self) -> Path:
        """Get the canonical top-level directory of the work tree."""
        return Path(self._run_git("rev-parse", "--show-toplevel")).resolve()

    def get_current_commit(self) -> str:
        """Get the full object id of the commit HEAD points at."""
        return self._run_git("rev-parse", "--verify", "--quiet", "HEAD^{commit}")

    def get_current_branch(self) -> str | None:
        """Get the current branch name, or None on a detached HEAD."""
        try:
            branch = self._run_git("symbolic-ref", "--quiet", "--short", "HEAD")
        except subprocess.CalledProcessError:
            return None
        return branch or None

    def get_config(self, key: str) -> str | None:
        """Get a single git config value, if set."""
        try:
            value = self._run_git("config", "--get", key)
        except subprocess.CalledProcessError:
            return None
        return value or None

    def list_remotes(self) -> list[str]:
        """List the names of configured remotes."""
        output = self._run_git("remote")
        return output.splitlines() if output else []

    def get_remote_url(self, name: str) -> str | None:
        """Get the fetch URL of a remote, if the remote exists."""
        try:
            url = self._run_git("remote", "get-url", name)
            return url if url else None
        except subprocess.CalledProcessError:
            return None

    def get_default_remote_name(self) -> str | None:
        """Pick the remote a plain ``git fetch`` would use.

        The current branch's configured remote wins, then the only remote
        when there is exactly one, then ``origin``.
        """
        remotes = self.list_remotes()
        branch = self.get_current_branch()
        if branch:
            configured = self.get_config(f"branch.{branch}.remote")
            if configured and configured in remotes:
                return configured
        if len(remotes) == 1:
            return remotes[0]
        if "origin" in remotes:
            return "origin"
        logger.debug("No default remote", remotes=remotes, branch=branch)
        return None
