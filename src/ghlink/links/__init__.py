"""Link formatting for ghlink."""

from ghlink.links.builder import LinkBuilder

__all__ = ["LinkBuilder"]
