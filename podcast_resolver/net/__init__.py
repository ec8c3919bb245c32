"""Outbound HTTP access."""

from .client_manager import FEED_ACCEPT, HTML_ACCEPT, HTTPClientManager

__all__ = ["HTTPClientManager", "FEED_ACCEPT", "HTML_ACCEPT"]
