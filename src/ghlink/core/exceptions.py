"""Exception hierarchy for ghlink."""

from typing import Any


class GhlinkError(Exception):
    """Base exception for all ghlink errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GhlinkError):
    """Raised when the environment or settings are unusable."""


class GitUnavailableError(ConfigurationError):
    """Raised when the git executable cannot be run."""


class InvalidQueryError(GhlinkError):
    """Raised when a link query is malformed or ambiguous."""


class PathResolutionError(GhlinkError):
    """Raised when the target path cannot be canonicalized."""


class RelativePathUnavailableError(PathResolutionError):
    """Raised when the target path lies outside the repository work tree."""


class RepositoryError(GhlinkError):
    """Base exception for repository lookups."""


class RepositoryNotFoundError(RepositoryError):
    """Raised when no enclosing git repository exists."""


class InvalidRemoteUrlError(RepositoryError):
    """Raised when a remote URL cannot be split into host and path."""


class MissingRemoteIdentityError(RepositoryError):
    """Raised when a link is requested for a repository without a remote."""


class UnresolvableHeadError(RepositoryError):
    """Raised when HEAD does not resolve to a commit."""


class TextNotFoundError(GhlinkError):
    """Raised when searched text matches no line of the target file."""


class FileReadError(GhlinkError):
    """Raised when the target file or standard input cannot be read."""
