"""MCP server initialization, tool and route registration."""

import asyncio
import logging
import os
import sys
from typing import Optional

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from .config import ServerConfig
from .discovery.resolver import PodcastResolver
from .errors import InvalidInputError
from .net.client_manager import HTTPClientManager
from .rss.diagnostics import debug_feeds
from .tools.debug_rss import debug_rss_impl
from .tools.fetch_podcasts import build_fetch_response, fetch_podcasts_impl
from .utils.logging import configure_logging, get_logger, log_with_context


# Create FastMCP server instance
mcp = FastMCP("Podcast Feed Resolver")

logger = get_logger("Server")

# Global components (initialized in initialize_server)
_config: Optional[ServerConfig] = None
_http_client: Optional[HTTPClientManager] = None
_resolver: Optional[PodcastResolver] = None


def initialize_server() -> tuple[ServerConfig, HTTPClientManager, PodcastResolver]:
    """
    Initialize logging, configuration and the resolver components.

    Returns:
        Tuple of (ServerConfig, HTTPClientManager, PodcastResolver)

    Raises:
        SystemExit: If initialization fails
    """
    try:
        configure_logging(os.getenv("LOG_LEVEL", "INFO"))

        logger.info("Starting Podcast Feed Resolver initialization")

        config = ServerConfig.from_environment()
        log_with_context(
            logger,
            logging.INFO,
            "Configuration loaded",
            context={
                "request_timeout_seconds": config.request_timeout_seconds,
                "user_agent": config.user_agent,
                "max_episodes": config.max_episodes,
                "max_sniffed_candidates": config.max_sniffed_candidates
            }
        )

        http_client = HTTPClientManager(config)
        resolver = PodcastResolver(http_client, config)

        logger.info("Podcast Feed Resolver initialization complete")
        return config, http_client, resolver

    except Exception as e:
        logger.error(
            "Failed to initialize server",
            exc_info=True,
            extra={"context": {"error": str(e)}}
        )
        sys.exit(1)


# MCP Tool Implementations

@mcp.tool()
async def fetch_podcasts(url: str, platform: str, quantity: Optional[int] = None) -> str:
    """
    Find the episodes of a podcast from its profile URL.

    Args:
        url: Podcast profile URL or feed URL
        platform: One of spotify, overcast, apple, acast, castos, libsyn,
            transistor, pocketcasts, rss
        quantity: Optional number of episodes to return (1-20)

    Returns:
        JSON string with episodes or error message
    """
    return await fetch_podcasts_impl(url, platform, _resolver, quantity)


@mcp.tool()
async def debug_rss() -> str:
    """
    Check that a set of well-known public podcast feeds can be fetched and parsed.

    Returns:
        JSON string with one status report per feed
    """
    return await debug_rss_impl(_http_client)


# Plain HTTP routes

@mcp.custom_route("/fetch-podcasts", methods=["POST"])
async def fetch_podcasts_route(request: Request) -> JSONResponse:
    """Handle ``POST /fetch-podcasts`` with a JSON body {url, platform, quantity?}."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict):
        error = InvalidInputError("Request body must be a JSON object.", code="invalid_request")
        return JSONResponse(error.to_dict(), status_code=error.status_code)

    body, status_code = await asyncio.to_thread(
        build_fetch_response,
        payload.get("url", ""),
        payload.get("platform", ""),
        _resolver,
        payload.get("quantity")
    )
    return JSONResponse(body, status_code=status_code)


@mcp.custom_route("/debug-rss", methods=["GET"])
async def debug_rss_route(request: Request) -> JSONResponse:
    """Handle ``GET /debug-rss``."""
    reports = await asyncio.to_thread(debug_feeds, _http_client)
    return JSONResponse(reports)


def get_server():
    """Get the FastMCP server instance."""
    return mcp


def set_components(
    config: ServerConfig,
    http_client: HTTPClientManager,
    resolver: PodcastResolver
):
    """
    Set global component references.

    Args:
        config: Server configuration
        http_client: HTTP Client Manager instance
        resolver: Podcast Resolver instance
    """
    global _config, _http_client, _resolver
    _config = config
    _http_client = http_client
    _resolver = resolver


def shutdown_server() -> None:
    """Release the outbound HTTP connection pool."""
    if _http_client is not None:
        _http_client.close()
        logger.info("HTTP client closed")
