"""Health report over a fixed set of public podcast feeds."""

import xml.sax
from typing import Any, Dict, List, Sequence, TYPE_CHECKING

import feedparser
import httpx

from ..net.client_manager import FEED_ACCEPT
from ..utils.logging import get_logger
from .parser import is_audio_enclosure

if TYPE_CHECKING:
    from ..net.client_manager import HTTPClientManager


logger = get_logger("FeedDiagnostics")


DEBUG_FEEDS = (
    "https://feeds.npr.org/510289/podcast.xml",  # NPR News
    "https://feeds.bbci.co.uk/programmes/b006qykl/rss.xml",  # BBC Radio 4
    "https://feeds.soundcloud.com/users/soundcloud:users:2091371/sounds.rss",
    "https://feeds.feedburner.com/oreillyradar",
    "https://feeds.feedburner.com/oreillynet",
    "https://feeds.npr.org/510318/podcast.xml",  # Up First
    "https://feeds.npr.org/510312/podcast.xml",  # Fresh Air
    "https://feeds.npr.org/510313/podcast.xml",  # All Things Considered
    "https://feeds.npr.org/510315/podcast.xml",  # Morning Edition
    "https://feeds.npr.org/510316/podcast.xml",  # Weekend Edition
)

MAX_SAMPLE_TITLES = 3


def probe_feed(feed_url: str, http_client: "HTTPClientManager") -> Dict[str, Any]:
    """
    Fetch one feed and describe what the parser would make of it.

    Args:
        feed_url: Feed to probe
        http_client: Client used for the request

    Returns:
        Report with status, HTTP code, error text, item counts and up to
        three sample titles
    """
    report: Dict[str, Any] = {
        "url": feed_url,
        "status": "unknown",
        "response_code": None,
        "error": None,
        "items_found": 0,
        "audio_items": 0,
        "sample_titles": []
    }

    try:
        response = http_client.get(feed_url, FEED_ACCEPT)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        report["status"] = "transport_error"
        report["error"] = str(e)
        return report

    report["response_code"] = response.status_code
    if response.status_code != 200:
        report["status"] = "http_error"
        report["error"] = f"HTTP {response.status_code}"
        return report

    feed = feedparser.parse(response.content)
    bozo_exception = getattr(feed, "bozo_exception", None)
    if isinstance(bozo_exception, xml.sax.SAXException) or not feed.entries:
        report["status"] = "xml_parse_error"
        report["error"] = (
            f"XML parsing failed: {bozo_exception}" if bozo_exception else "No items found"
        )
        return report

    report["status"] = "success"
    report["items_found"] = len(feed.entries)
    for entry in feed.entries:
        enclosures = entry.get("enclosures") or []
        if not enclosures or not enclosures[0].get("href"):
            continue
        if not is_audio_enclosure(enclosures[0].get("type", ""), enclosures[0]["href"]):
            continue
        report["audio_items"] += 1
        if len(report["sample_titles"]) < MAX_SAMPLE_TITLES:
            report["sample_titles"].append(entry.get("title", ""))

    return report


def debug_feeds(
    http_client: "HTTPClientManager",
    feeds: Sequence[str] = DEBUG_FEEDS
) -> List[Dict[str, Any]]:
    """Probe every feed in ``feeds`` sequentially."""
    reports = [probe_feed(feed_url, http_client) for feed_url in feeds]
    logger.info(
        "Feed diagnostics complete",
        extra={"context": {
            "feed_count": len(reports),
            "healthy": sum(1 for r in reports if r["status"] == "success")
        }}
    )
    return reports
