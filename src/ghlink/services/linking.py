"""Link service."""

from pathlib import Path

import structlog

from ghlink.config.settings import Settings, get_settings
from ghlink.core.models.query import LinkQuery
from ghlink.git.commit import CommitResolver
from ghlink.git.locator import RepositoryLocator
from ghlink.git.remote import RemoteIdentityResolver
from ghlink.links.builder import LinkBuilder
from ghlink.search.line_locator import LineLocator

logger = structlog.get_logger(__name__)


class LinkService:
    """Service that turns a path and a query into a permanent link.

    Runs the full pipeline:
    1. Locate the enclosing repository and the repository-relative path
    2. Resolve the remote identity and the current commit
    3. Resolve the line range, searching the file if needed
    4. Format the blob URL
    """

    def __init__(
        self,
        settings: Settings | None = None,
        locator: RepositoryLocator | None = None,
        remote_resolver: RemoteIdentityResolver | None = None,
        commit_resolver: CommitResolver | None = None,
        line_locator: LineLocator | None = None,
        builder: LinkBuilder | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._locator = locator or RepositoryLocator(git_executable=settings.git_executable)
        self._remote_resolver = remote_resolver or RemoteIdentityResolver(remote=settings.remote)
        self._commit_resolver = commit_resolver or CommitResolver()
        self._line_locator = line_locator or LineLocator()
        self._builder = builder or LinkBuilder()

    def create_link(self, query: LinkQuery, path: str | Path) -> str:
        """Create a permanent link to ``path`` for ``query``."""
        repo, relative_path = self._locator.locate(path)
        identity = self._remote_resolver.resolve(repo)
        commit = self._commit_resolver.resolve_head(repo)
        line_range = self._line_locator.locate(query, Path(path))

        url = self._builder.build(identity, commit, relative_path, line_range)
        logger.debug(
            "Link created",
            path=relative_path,
            commit=commit,
            query=query.kind,
            url=url,
        )
        return url
