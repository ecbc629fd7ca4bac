"""Core: config and constants.

Single place for settings and shared constants.
"""

from rediscache.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
