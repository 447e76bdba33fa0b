"""Line searching for ghlink."""

from ghlink.search.line_locator import LineLocator, search_lines

__all__ = ["LineLocator", "search_lines"]
