"""Core domain models and exceptions for ghlink."""

from ghlink.core.exceptions import (
    ConfigurationError,
    FileReadError,
    GhlinkError,
    GitUnavailableError,
    InvalidQueryError,
    InvalidRemoteUrlError,
    MissingRemoteIdentityError,
    PathResolutionError,
    RelativePathUnavailableError,
    RepositoryError,
    RepositoryNotFoundError,
    TextNotFoundError,
    UnresolvableHeadError,
)
from ghlink.core.models import (
    LineRange,
    LineRangeResult,
    LinkQuery,
    NoRange,
    RemoteIdentity,
    TextSearch,
    query_from_options,
)

__all__ = [
    # Models
    "LinkQuery",
    "NoRange",
    "LineRange",
    "TextSearch",
    "query_from_options",
    "LineRangeResult",
    "RemoteIdentity",
    # Exceptions
    "GhlinkError",
    "ConfigurationError",
    "GitUnavailableError",
    "InvalidQueryError",
    "PathResolutionError",
    "RelativePathUnavailableError",
    "RepositoryError",
    "RepositoryNotFoundError",
    "InvalidRemoteUrlError",
    "MissingRemoteIdentityError",
    "UnresolvableHeadError",
    "TextNotFoundError",
    "FileReadError",
]
