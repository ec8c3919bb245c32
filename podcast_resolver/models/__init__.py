"""Data models for episodes and platforms."""

from .episode import Episode
from .platform import PLATFORM_INFO, Platform, PlatformInfo

__all__ = ["Episode", "Platform", "PlatformInfo", "PLATFORM_INFO"]
