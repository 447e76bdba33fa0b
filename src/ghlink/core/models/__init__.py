"""Domain models for ghlink."""

from ghlink.core.models.link import LineRangeResult
from ghlink.core.models.query import (
    LineRange,
    LinkQuery,
    NoRange,
    TextSearch,
    query_from_options,
)
from ghlink.core.models.repository import RemoteIdentity

__all__ = [
    "LinkQuery",
    "NoRange",
    "LineRange",
    "TextSearch",
    "query_from_options",
    "LineRangeResult",
    "RemoteIdentity",
]
