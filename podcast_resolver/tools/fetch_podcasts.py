"""Tool for resolving a profile URL into podcast episodes."""

import asyncio
import json
import logging
import time
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

from ..errors import InvalidInputError, PodcastResolverError, ResolutionError
from ..models.platform import Platform
from ..utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from ..discovery.resolver import PodcastResolver


logger = get_logger("FetchPodcastsTool")


MAX_QUANTITY = 20


def validate_quantity(quantity: Any) -> Optional[int]:
    """
    Check the optional episode count requested by the caller.

    Raises:
        InvalidInputError: If quantity is not an integer between 1 and 20
    """
    if quantity is None:
        return None
    if isinstance(quantity, bool) or not isinstance(quantity, int) or not 1 <= quantity <= MAX_QUANTITY:
        raise InvalidInputError(
            f"Invalid quantity: {quantity}. Must be an integer between 1 and {MAX_QUANTITY}.",
            code="invalid_quantity"
        )
    return quantity


def build_fetch_response(
    url: str,
    platform: str,
    resolver: "PodcastResolver",
    quantity: Optional[int] = None
) -> Tuple[Dict[str, Any], int]:
    """
    Resolve podcasts and build the response body.

    Args:
        url: Podcast profile URL
        platform: Platform name
        resolver: Podcast Resolver instance
        quantity: Optional maximum number of episodes to return

    Returns:
        Tuple of (response body, HTTP status code)
    """
    start_time = time.time()

    try:
        log_with_context(
            logger,
            logging.INFO,
            "fetch_podcasts tool invoked",
            context={"url": url, "platform": platform, "quantity": quantity}
        )

        limit = validate_quantity(quantity)
        episodes = resolver.resolve_podcasts(url, platform)
        if limit is not None:
            episodes = episodes[:limit]

        execution_time_ms = (time.time() - start_time) * 1000
        log_with_context(
            logger,
            logging.INFO,
            "fetch_podcasts tool completed successfully",
            context={"platform": platform, "count": len(episodes)},
            execution_time_ms=execution_time_ms
        )
        return {
            "success": True,
            "platform": Platform(platform).describe(),
            "podcasts": [episode.to_dict() for episode in episodes],
            "count": len(episodes)
        }, 200

    except PodcastResolverError as e:
        execution_time_ms = (time.time() - start_time) * 1000
        log_with_context(
            logger,
            logging.WARNING,
            "fetch_podcasts tool returned an error",
            context={"url": url, "platform": platform, "code": e.code},
            execution_time_ms=execution_time_ms,
            error_type=e.error_type
        )
        return e.to_dict(), e.status_code

    except Exception as e:
        execution_time_ms = (time.time() - start_time) * 1000
        logger.error(
            "fetch_podcasts tool failed",
            exc_info=True,
            extra={
                "context": {"url": url, "platform": platform, "error": str(e)},
                "execution_time_ms": execution_time_ms
            }
        )
        error = ResolutionError(f"Failed to fetch podcasts: {str(e)}")
        return error.to_dict(), error.status_code


async def fetch_podcasts_impl(
    url: str,
    platform: str,
    resolver: "PodcastResolver",
    quantity: Optional[int] = None
) -> str:
    """
    Fetch podcast episodes for a profile URL.

    Args:
        url: Podcast profile URL (Spotify show, Apple Podcasts page, feed, ...)
        platform: Platform name
        resolver: Podcast Resolver instance
        quantity: Optional maximum number of episodes to return

    Returns:
        JSON string with episodes or error message
    """
    # Discovery does blocking HTTP; keep it off the event loop
    body, _ = await asyncio.to_thread(build_fetch_response, url, platform, resolver, quantity)
    return json.dumps(body)
