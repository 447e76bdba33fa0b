"""Configuration for ghlink."""

from ghlink.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
