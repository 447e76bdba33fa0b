"""Git integration module for ghlink."""

from ghlink.git.commit import CommitResolver
from ghlink.git.locator import RepositoryLocator
from ghlink.git.remote import RemoteIdentityResolver, parse_remote_url
from ghlink.git.repository import GitRepository

__all__ = [
    "CommitResolver",
    "GitRepository",
    "RemoteIdentityResolver",
    "RepositoryLocator",
    "parse_remote_url",
]
