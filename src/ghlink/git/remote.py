"""Forge identity from a repository's fetch remote."""

import re
from urllib.parse import urlsplit

import structlog

from ghlink.core.exceptions import InvalidRemoteUrlError
from ghlink.core.models.repository import RemoteIdentity
from ghlink.git.repository import GitRepository

logger = structlog.get_logger(__name__)

URL_SCHEMES = frozenset({"ssh", "git", "http", "https", "git+ssh", "ssh+git"})

# [user@]host:path, where host has no slash and path does not start with //
SCP_LIKE_RE = re.compile(
    r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/@\[\]]+|\[[^\]]+\]):(?!//)(?P<path>.*)$"
)


def parse_remote_url(url: str) -> tuple[str, str]:
    """Split a git remote URL into host and repository path.

    Handles:
    - git@github.com:org/repo.git -> ("github.com", "org/repo")
    - https://user@github.com:443/org/repo.git -> ("github.com", "org/repo")
    - ssh://git@gitlab.com/group/sub/repo.git/ -> ("gitlab.com", "group/sub/repo")

    Raises:
        InvalidRemoteUrlError: for local paths, file URLs, or URLs missing a
            host or path.
    """
    try:
        url.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidRemoteUrlError(
            "remote URL is not valid UTF-8",
            details={"url": url.encode("utf-8", "surrogateescape").decode("utf-8", "replace")},
        ) from e

    url = url.strip()
    if "://" in url:
        try:
            parts = urlsplit(url)
            host = parts.hostname or ""
        except ValueError as e:
            raise InvalidRemoteUrlError(
                f"malformed remote URL: {url}", details={"url": url}
            ) from e
        if parts.scheme.lower() not in URL_SCHEMES:
            raise InvalidRemoteUrlError(
                f"unsupported scheme in remote URL: {url}", details={"url": url}
            )
        path = parts.path
    else:
        match = SCP_LIKE_RE.match(url)
        # A drive letter like C:\repo is a local path, not a host
        if not match or len(match.group("host")) == 1:
            raise InvalidRemoteUrlError(
                f"remote URL has no host: {url}", details={"url": url}
            )
        host = match.group("host").strip("[]")
        path = match.group("path")

    path = path.rstrip("/").removesuffix(".git").strip("/")
    if not host or not path:
        raise InvalidRemoteUrlError(
            f"cannot split remote URL into host and path: {url}",
            details={"url": url},
        )
    return host, path


class RemoteIdentityResolver:
    """Resolves the forge host and repository path of a repository."""

    def __init__(self, remote: str | None = None) -> None:
        self._remote = remote

    def resolve(self, repo: GitRepository) -> RemoteIdentity | None:
        """Return the remote identity, or None when no remote is configured.

        Raises:
            InvalidRemoteUrlError: if a remote exists but its URL cannot be
                decomposed.
        """
        name = self._remote or repo.get_default_remote_name()
        if name is None:
            logger.debug("No remote configured", repo=str(repo.repo_path))
            return None

        url = repo.get_remote_url(name)
        if url is None:
            logger.debug("Remote has no URL", repo=str(repo.repo_path), remote=name)
            return None

        host, repo_path = parse_remote_url(url)
        logger.debug("Resolved remote", remote=name, host=host, repo_path=repo_path)
        return RemoteIdentity(host=host, repo_path=repo_path)
