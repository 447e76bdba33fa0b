"""Repository discovery for an arbitrary filesystem path."""

import subprocess
from pathlib import Path

import structlog

from ghlink.core.exceptions import (
    PathResolutionError,
    RelativePathUnavailableError,
    RepositoryNotFoundError,
)
from ghlink.git.repository import GitRepository

logger = structlog.get_logger(__name__)


def find_git_root(start: Path) -> Path | None:
    """Find git repository root by walking up to find .git.

    Handles both regular repos (.git directory) and worktrees or
    submodules (.git file).
    """
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


class RepositoryLocator:
    """Finds the repository enclosing a path and the path relative to it."""

    def __init__(self, git_executable: str = "git") -> None:
        self._git = git_executable

    def locate(self, path: str | Path) -> tuple[GitRepository, str]:
        """Locate the repository for ``path``.

        Returns the repository handle and the canonical path relative to
        the work tree root, with forward slashes.

        Raises:
            PathResolutionError: if the path cannot be canonicalized.
            RepositoryNotFoundError: if no ancestor is a repository root.
            RelativePathUnavailableError: if the canonical path is outside
                the work tree.
        """
        try:
            canonical = Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise PathResolutionError(
                f"cannot resolve path {path}: {e}",
                details={"path": str(path)},
            ) from e

        start = canonical if canonical.is_dir() else canonical.parent
        root = find_git_root(start)
        if root is None:
            raise RepositoryNotFoundError(
                f"no git repository found for {canonical}",
                details={"path": str(canonical)},
            )

        repo = GitRepository(root, git_executable=self._git)
        if not repo.is_git_repo():
            raise RepositoryNotFoundError(
                f"{root} is not a valid git repository",
                details={"path": str(canonical), "root": str(root)},
            )
        try:
            work_tree = repo.get_work_tree()
        except subprocess.CalledProcessError as e:
            raise RelativePathUnavailableError(
                f"{root} has no work tree",
                details={"path": str(canonical), "root": str(root)},
            ) from e

        relative_path = self._relative_to(canonical, work_tree)
        logger.debug(
            "Located repository",
            path=str(canonical),
            work_tree=str(work_tree),
            relative_path=relative_path,
        )
        return repo, relative_path

    @staticmethod
    def _relative_to(canonical: Path, work_tree: Path) -> str:
        try:
            relative = canonical.relative_to(work_tree)
        except ValueError as e:
            raise RelativePathUnavailableError(
                f"{canonical} is outside the work tree {work_tree}",
                details={"path": str(canonical), "work_tree": str(work_tree)},
            ) from e
        if relative.parts and relative.parts[0] == ".git":
            raise RelativePathUnavailableError(
                f"{canonical} is inside the git directory",
                details={"path": str(canonical), "work_tree": str(work_tree)},
            )
        return "" if relative == Path(".") else relative.as_posix()
