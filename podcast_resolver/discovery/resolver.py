"""Request validation and routing to the platform discovery cascades."""

import logging
import time
from typing import List, Optional
from urllib.parse import urlparse

from ..config import ServerConfig
from ..errors import InvalidInputError, NotFoundError, ResolutionError
from ..models.episode import Episode
from ..models.platform import Platform
from ..net.client_manager import HTTPClientManager
from ..utils.logging import get_logger, log_with_context
from .steps import DiscoveryContext, extract_show_id
from .strategies import run_strategy


logger = get_logger("PodcastResolver")


def validate_profile_url(url: str) -> str:
    """
    Check that ``url`` is a well-formed absolute URL.

    Raises:
        InvalidInputError: If the URL has no scheme or host
    """
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        raise InvalidInputError("Invalid URL provided.", code="invalid_url")

    try:
        parsed = urlparse(url)
    except ValueError:
        raise InvalidInputError("Invalid URL provided.", code="invalid_url")

    if not parsed.scheme or not parsed.netloc:
        raise InvalidInputError("Invalid URL provided.", code="invalid_url")
    return url


def validate_platform(platform: str) -> Platform:
    """
    Map a platform name onto ``Platform``.

    Raises:
        InvalidInputError: If the name is not a supported platform
    """
    resolved = Platform.from_value(platform) if isinstance(platform, str) else None
    if resolved is None:
        raise InvalidInputError("Invalid platform specified.", code="invalid_platform")
    return resolved


class PodcastResolver:
    """
    Resolves a podcast profile URL into episodes.

    Validates the request, runs the platform's discovery cascade and maps
    the outcome onto the InvalidInput / NotFound / ResolutionError taxonomy.
    Does no I/O of its own; every request goes through the discovery steps.
    """

    def __init__(self, http_client: HTTPClientManager, config: Optional[ServerConfig] = None):
        """
        Initialize Podcast Resolver.

        Args:
            http_client: HTTP client shared by all discovery steps
            config: Server configuration (defaults apply when omitted)
        """
        self.http_client = http_client
        self.config = config or ServerConfig()

    def resolve_podcasts(self, profile_url: str, platform: str) -> List[Episode]:
        """
        Find the episodes behind a podcast profile URL.

        Args:
            profile_url: Absolute URL of a profile page or feed
            platform: One of the supported platform names

        Returns:
            Non-empty list of at most ``max_episodes`` episodes

        Raises:
            InvalidInputError: Malformed URL or unknown platform
            NotFoundError: Discovery produced no episodes
            ResolutionError: Unexpected failure during discovery
        """
        start_time = time.time()

        validate_profile_url(profile_url)
        resolved_platform = validate_platform(platform)

        ctx = DiscoveryContext(
            profile_url=profile_url,
            platform=resolved_platform,
            http_client=self.http_client,
            config=self.config,
            show_id=extract_show_id(resolved_platform, profile_url)
        )

        log_with_context(
            logger,
            logging.INFO,
            "Resolving podcasts",
            context={
                "profile_url": profile_url,
                "platform": resolved_platform.value,
                "show_id": ctx.show_id
            }
        )

        try:
            episodes = run_strategy(ctx)
        except Exception as e:
            logger.error(
                "Discovery failed",
                exc_info=True,
                extra={
                    "context": {"platform": resolved_platform.value, "error": str(e)},
                    "error_type": ResolutionError.error_type
                }
            )
            raise ResolutionError(str(e)) from e

        execution_time_ms = (time.time() - start_time) * 1000
        if not episodes:
            log_with_context(
                logger,
                logging.WARNING,
                "No podcasts found",
                context={"profile_url": profile_url, "platform": resolved_platform.value},
                execution_time_ms=execution_time_ms,
                error_type=NotFoundError.error_type
            )
            raise NotFoundError("No podcasts found at the provided URL.")

        log_with_context(
            logger,
            logging.INFO,
            "Podcasts resolved",
            context={"platform": resolved_platform.value, "episode_count": len(episodes)},
            execution_time_ms=execution_time_ms
        )
        return episodes[:self.config.max_episodes]
