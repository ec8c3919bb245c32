"""Configuration management for the Podcast Feed Resolver."""

import os
from dataclasses import dataclass


DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; Podcast Feed Resolver)"


@dataclass
class ServerConfig:
    """Configuration for the Podcast Feed Resolver server."""

    request_timeout_seconds: float = 15.0  # Per outbound request
    user_agent: str = DEFAULT_USER_AGENT
    max_episodes: int = 20  # Episodes kept per feed
    max_sniffed_candidates: int = 5  # Non-priority sniffed feeds tried
    itunes_lookup_url: str = "https://itunes.apple.com/lookup"

    def validate(self) -> None:
        """
        Validate configuration fields.

        Raises:
            ValueError: If a field is missing or out of range
        """
        if self.request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be positive")

        if not self.user_agent:
            raise ValueError("user_agent is required")

        if self.max_episodes <= 0:
            raise ValueError("max_episodes must be positive")

        if self.max_sniffed_candidates <= 0:
            raise ValueError("max_sniffed_candidates must be positive")

        if not self.itunes_lookup_url:
            raise ValueError("itunes_lookup_url is required")

    @classmethod
    def from_environment(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        config = cls(
            request_timeout_seconds=float(os.getenv("REQUEST_TIMEOUT_SECONDS", "15")),
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            max_episodes=int(os.getenv("MAX_EPISODES", "20")),
            max_sniffed_candidates=int(os.getenv("MAX_SNIFFED_CANDIDATES", "5")),
            itunes_lookup_url=os.getenv(
                "ITUNES_LOOKUP_URL",
                "https://itunes.apple.com/lookup"
            )
        )
        config.validate()
        return config
