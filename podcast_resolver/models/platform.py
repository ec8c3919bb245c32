"""Supported podcast platforms and their shared lookup table."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Pattern, Tuple


class Platform(Enum):
    """Podcast platforms a profile URL can belong to."""

    SPOTIFY = "spotify"
    OVERCAST = "overcast"
    APPLE = "apple"
    ACAST = "acast"
    CASTOS = "castos"
    LIBSYN = "libsyn"
    TRANSISTOR = "transistor"
    POCKETCASTS = "pocketcasts"
    RSS = "rss"

    @classmethod
    def from_value(cls, value: str) -> Optional["Platform"]:
        """Return the platform for ``value`` or None when it is not known."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def info(self) -> "PlatformInfo":
        return PLATFORM_INFO[self]

    def describe(self) -> Dict[str, str]:
        """Name, display label and icon, as shown next to an episode list."""
        return {"name": self.value, "label": self.info.label, "icon": self.info.icon}


@dataclass(frozen=True)
class PlatformInfo:
    """Display and discovery metadata for one platform."""

    label: str
    icon: str
    placeholder_label: Optional[str] = None  # Defaults to label
    id_pattern: Optional[Pattern[str]] = None
    feed_host_patterns: Tuple[Pattern[str], ...] = field(default_factory=tuple)

    @property
    def source_label(self) -> str:
        """Name used in placeholder episode descriptions."""
        return self.placeholder_label or self.label


_SPOTIFY_ID = re.compile(r"open\.spotify\.com/show/([a-zA-Z0-9]+)")

PLATFORM_INFO: Dict[Platform, PlatformInfo] = {
    Platform.SPOTIFY: PlatformInfo(
        label="Spotify",
        icon="🎵",
        id_pattern=_SPOTIFY_ID
    ),
    Platform.OVERCAST: PlatformInfo(
        label="Overcast",
        icon="☁️",
        id_pattern=re.compile(r"overcast\.fm/\+([a-zA-Z0-9]+)")
    ),
    Platform.APPLE: PlatformInfo(
        label="Apple Podcasts",
        icon="🍎",
        placeholder_label="Apple Podcast",
        id_pattern=re.compile(r"podcasts\.apple\.com/[^/]+/podcast/[^/]+/id(\d+)")
    ),
    Platform.ACAST: PlatformInfo(
        label="Acast",
        icon="🅰️",
        feed_host_patterns=(re.compile(r"feeds\.acast\.com/", re.IGNORECASE),)
    ),
    Platform.CASTOS: PlatformInfo(
        label="Castos",
        icon="🎙️",
        feed_host_patterns=(re.compile(r"feeds\.castos\.com/", re.IGNORECASE),)
    ),
    Platform.LIBSYN: PlatformInfo(
        label="Libsyn",
        icon="🧩",
        feed_host_patterns=(
            re.compile(r"feeds\.libsyn\.com/", re.IGNORECASE),
            re.compile(r"\.libsyn\.com/rss$", re.IGNORECASE),
        )
    ),
    Platform.TRANSISTOR: PlatformInfo(
        label="Transistor",
        icon="⚡",
        feed_host_patterns=(re.compile(r"feeds\.transistor\.fm/", re.IGNORECASE),)
    ),
    # Pocket Casts is resolved exactly like Spotify
    Platform.POCKETCASTS: PlatformInfo(
        label="Pocket Casts",
        icon="📱",
        id_pattern=_SPOTIFY_ID
    ),
    Platform.RSS: PlatformInfo(
        label="RSS Feed",
        icon="📡"
    ),
}
