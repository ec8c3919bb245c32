"""RSS feed parsing logic."""

import logging
import xml.sax
from datetime import timezone
from typing import Any, List, Optional, TYPE_CHECKING

import feedparser
from bs4 import BeautifulSoup
from dateutil import parser as date_parser

from ..models.episode import Episode
from ..utils.logging import get_logger, log_with_context

if TYPE_CHECKING:
    from ..net.client_manager import HTTPClientManager


logger = get_logger("RSSParser")


DEFAULT_MAX_EPISODES = 20

# Date used when an item has no parseable pubDate
FALLBACK_DATE = "1970-01-01"

AUDIO_EXTENSIONS = (".mp3", ".wav", ".m4a")


def parse_feed(
    feed_url: str,
    http_client: "HTTPClientManager",
    max_episodes: int = DEFAULT_MAX_EPISODES
) -> List[Episode]:
    """
    Fetch a feed and parse it into Episode objects.

    Never raises: a failed request or an unreadable document yields an
    empty list so the caller can try its next candidate.

    Args:
        feed_url: URL of the RSS feed
        http_client: Client used for the request
        max_episodes: Maximum number of episodes returned

    Returns:
        List of Episode objects in feed order, possibly empty
    """
    content = http_client.fetch_feed(feed_url)
    if content is None:
        return []

    try:
        return parse_feed_content(content, feed_url, max_episodes)
    except Exception as e:
        logger.error(
            "Failed to parse RSS feed",
            exc_info=True,
            extra={"context": {"feed_url": feed_url, "error": str(e)}}
        )
        return []


def parse_feed_content(
    content: bytes,
    feed_url: str = "",
    max_episodes: int = DEFAULT_MAX_EPISODES
) -> List[Episode]:
    """
    Parse raw feed bytes into Episode objects.

    Args:
        content: Feed document
        feed_url: Source URL, only used for logging
        max_episodes: Maximum number of episodes returned

    Returns:
        Audio episodes in document order, at most ``max_episodes``
    """
    feed = feedparser.parse(content)

    if feed.bozo:
        error = getattr(feed, "bozo_exception", "Unknown parsing error")
        if isinstance(error, xml.sax.SAXException):
            log_with_context(
                logger,
                logging.WARNING,
                "RSS feed is not well-formed XML",
                context={"feed_url": feed_url, "error": str(error)}
            )
            return []
        log_with_context(
            logger,
            logging.DEBUG,
            "RSS feed parsing warning",
            context={"feed_url": feed_url, "error": str(error)}
        )

    episodes: List[Episode] = []
    for entry in feed.entries:
        episode = parse_episode(entry)
        if episode is None:
            continue
        episodes.append(episode)
        if len(episodes) >= max_episodes:
            break

    log_with_context(
        logger,
        logging.INFO,
        "Parsed RSS feed",
        context={
            "feed_url": feed_url,
            "total_entries": len(feed.entries),
            "episode_count": len(episodes)
        }
    )
    return episodes


def parse_episode(entry: Any) -> Optional[Episode]:
    """
    Parse a single feed entry into an Episode object.

    Args:
        entry: feedparser entry object

    Returns:
        Episode object, or None if the entry has no audio enclosure
    """
    enclosures = entry.get("enclosures") or []
    if not enclosures:
        return None

    enclosure = enclosures[0]
    audio_url = enclosure.get("href", "")
    if not audio_url:
        return None

    if not is_audio_enclosure(enclosure.get("type", ""), audio_url):
        return None

    return Episode(
        title=entry.get("title", ""),
        audio_url=audio_url,
        description=strip_markup(entry.get("description", "")),
        duration=entry.get("itunes_duration", ""),
        date=format_pub_date(entry.get("published", ""))
    )


def is_audio_enclosure(mime_type: str, url: str) -> bool:
    """
    Decide whether an enclosure points at audio.

    Substring matching on purpose: ``file.mp3?x=1`` and ``/a.mp3/b`` count.
    """
    if "audio" in mime_type.lower():
        return True
    lowered = url.lower()
    return any(extension in lowered for extension in AUDIO_EXTENSIONS)


def strip_markup(text: str) -> str:
    """Reduce an HTML fragment to its plain text."""
    if "<" not in text:
        return text.strip()

    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text().strip()


def format_pub_date(value: str) -> str:
    """Reformat an RSS pubDate as a UTC YYYY-MM-DD date, or FALLBACK_DATE."""
    if not value:
        return FALLBACK_DATE
    try:
        published = date_parser.parse(value)
        # Offsets are normalized to UTC; naive dates are taken as UTC already
        if published.tzinfo is not None:
            published = published.astimezone(timezone.utc)
        return published.strftime("%Y-%m-%d")
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unparseable pubDate {value!r}: {e}")
        return FALLBACK_DATE
