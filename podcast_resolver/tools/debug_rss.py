"""Tool reporting the health of a few well-known public feeds."""

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING

from ..rss.diagnostics import debug_feeds
from ..utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from ..net.client_manager import HTTPClientManager


logger = get_logger("DebugRSSTool")


async def debug_rss_impl(http_client: "HTTPClientManager") -> str:
    """
    Probe the fixed diagnostic feeds.

    Args:
        http_client: HTTP Client Manager instance

    Returns:
        JSON string with one report per feed
    """
    start_time = time.time()
    reports = await asyncio.to_thread(debug_feeds, http_client)

    log_with_context(
        logger,
        logging.INFO,
        "debug_rss tool completed",
        context={"feed_count": len(reports)},
        execution_time_ms=(time.time() - start_time) * 1000
    )
    return json.dumps(reports)
