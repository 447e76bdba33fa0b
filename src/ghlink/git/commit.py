"""Current commit resolution."""

import re
import subprocess

from ghlink.core.exceptions import UnresolvableHeadError
from ghlink.git.repository import GitRepository

# SHA-1 or SHA-256 object id
COMMIT_ID_RE = re.compile(r"^(?:[0-9a-f]{40}|[0-9a-f]{64})$")


class CommitResolver:
    """Resolves HEAD to a full commit id."""

    def resolve_head(self, repo: GitRepository) -> str:
        """Return the full object id of the checked-out commit.

        Raises:
            UnresolvableHeadError: if the repository has no commits or HEAD
                is broken.
        """
        try:
            commit = repo.get_current_commit()
        except subprocess.CalledProcessError as e:
            raise UnresolvableHeadError(
                f"cannot resolve HEAD in {repo.repo_path}",
                details={"repo": str(repo.repo_path), "stderr": (e.stderr or "").strip()},
            ) from e
        if not COMMIT_ID_RE.match(commit):
            raise UnresolvableHeadError(
                f"HEAD resolved to unexpected value {commit!r}",
                details={"repo": str(repo.repo_path), "commit": commit},
            )
        return commit
