"""Outbound HTTP client management."""

import logging
from typing import Any, Optional

import httpx

from ..config import ServerConfig
from ..utils.logging import get_logger, log_with_context


logger = get_logger("HTTPClientManager")


HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
FEED_ACCEPT = "application/rss+xml, application/xml, text/xml"
JSON_ACCEPT = "application/json"


class HTTPClientManager:
    """
    Owns the ``httpx.Client`` used for every outbound request.

    All requests are blocking GETs sharing one user agent and one timeout.
    Helper methods translate transport failures into ``None`` so discovery
    steps can move on to the next candidate.
    """

    def __init__(
        self,
        config: ServerConfig,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize HTTP Client Manager.

        Args:
            config: Server configuration (timeout, user agent)
            transport: Optional transport override, used by tests
        """
        self.timeout = config.request_timeout_seconds
        self.user_agent = config.user_agent
        self._client = httpx.Client(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=transport
        )
        logger.info(
            "HTTP client created",
            extra={"context": {"timeout_seconds": self.timeout}}
        )

    def get(self, url: str, accept: str) -> httpx.Response:
        """
        Issue a GET request.

        Args:
            url: Absolute URL to fetch
            accept: Value of the Accept header

        Returns:
            The response, whatever its status code

        Raises:
            httpx.HTTPError: On transport failure or timeout
            httpx.InvalidURL: If ``url`` cannot be requested at all
        """
        logger.debug(f"GET {url}")
        return self._client.get(url, headers={"Accept": accept})

    def fetch_page(self, url: str) -> Optional[str]:
        """
        Fetch an HTML page body.

        The body is returned regardless of status code; error pages still get
        scanned for feed links.

        Args:
            url: Page URL

        Returns:
            Page text, or None on transport failure
        """
        try:
            response = self.get(url, HTML_ACCEPT)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log_with_context(
                logger,
                logging.WARNING,
                "Page fetch failed",
                context={"url": url, "error": str(e)}
            )
            return None
        return response.text

    def fetch_feed(self, url: str) -> Optional[bytes]:
        """
        Fetch raw feed bytes.

        Args:
            url: Feed URL

        Returns:
            Response body for a 200 response, otherwise None
        """
        try:
            response = self.get(url, FEED_ACCEPT)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log_with_context(
                logger,
                logging.WARNING,
                "Feed request failed",
                context={"feed_url": url, "error": str(e)}
            )
            return None

        if response.status_code != 200:
            log_with_context(
                logger,
                logging.WARNING,
                "Feed request returned HTTP error",
                context={"feed_url": url, "status_code": response.status_code}
            )
            return None

        return response.content

    def fetch_json(self, url: str, params: Optional[dict] = None) -> Optional[Any]:
        """
        Fetch and decode a JSON document.

        Args:
            url: API URL
            params: Optional query parameters

        Returns:
            Decoded JSON, or None on transport or decoding failure
        """
        try:
            response = self._client.get(
                url,
                params=params,
                headers={"Accept": JSON_ACCEPT}
            )
            return response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log_with_context(
                logger,
                logging.WARNING,
                "JSON request failed",
                context={"url": url, "error": str(e)}
            )
        except ValueError as e:
            log_with_context(
                logger,
                logging.WARNING,
                "Response is not valid JSON",
                context={"url": url, "error": str(e)}
            )
        return None

    def close(self) -> None:
        """Close the underlying client and its connection pool."""
        self._client.close()
