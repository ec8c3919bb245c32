"""Feed parsing and feed-link sniffing."""

from .parser import parse_feed, parse_feed_content
from .sniffer import extract_feed_urls

__all__ = ["parse_feed", "parse_feed_content", "extract_feed_urls"]
