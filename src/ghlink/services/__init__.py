"""Services layer for ghlink."""

from ghlink.services.linking import LinkService

__all__ = ["LinkService"]
