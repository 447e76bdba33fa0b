"""Blob URL construction."""

from urllib.parse import quote

from ghlink.core.exceptions import MissingRemoteIdentityError
from ghlink.core.models.link import LineRangeResult
from ghlink.core.models.repository import RemoteIdentity

# RFC 3986 path characters left as-is
PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~"


class LinkBuilder:
    """Formats permanent blob URLs.

    Produces ``https://{host}/{repo_path}/blob/{commit}/{path}`` followed by
    ``#L{first}`` and ``-L{last}`` when a line range is given.
    """

    def build(
        self,
        identity: RemoteIdentity | None,
        commit: str,
        relative_path: str,
        line_range: LineRangeResult | None = None,
    ) -> str:
        """Build the link for a file at a commit."""
        if identity is None:
            raise MissingRemoteIdentityError(
                "repository has no remote; cannot build a link",
                details={"commit": commit, "path": relative_path},
            )
        # Undecodable file names arrive surrogate-escaped; encode their raw bytes
        path = quote(relative_path, safe=PATH_SAFE_CHARS, errors="surrogateescape")
        url = f"{identity.web_base}/blob/{commit}/{path}"
        if line_range is not None:
            url += line_range.fragment
        return url
