"""Data model for podcast episodes."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Episode:
    """
    One playable podcast episode.

    Produced by the RSS parser or the placeholder generator and never
    modified afterwards.
    """

    title: str
    audio_url: str
    description: str  # Plain text, markup stripped
    duration: str  # Free-form, usually "MM:SS" or "HH:MM:SS", may be empty
    date: str  # Format: "YYYY-MM-DD"

    def to_dict(self) -> Dict[str, Any]:
        """Convert Episode to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "audio_url": self.audio_url,
            "description": self.description,
            "duration": self.duration,
            "date": self.date
        }
