"""Individual feed discovery steps.

Each step looks at one ``DiscoveryContext`` and returns the episodes it
managed to find, or an empty list so the next step can have a go.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Sequence
from urllib.parse import urlparse

from ..config import ServerConfig
from ..models.episode import Episode
from ..models.platform import Platform
from ..net.client_manager import HTTPClientManager
from ..rss.parser import parse_feed
from ..rss.sniffer import extract_feed_urls
from ..utils.logging import get_logger, log_with_context
from .placeholder import create_placeholder_episodes, create_sample_episodes


logger = get_logger("DiscoverySteps")


# Profile URLs that already point at a feed document
FEED_PATH_PATTERN = re.compile(r"\.(xml|rss)$", re.IGNORECASE)


@dataclass
class DiscoveryContext:
    """Everything a step needs to know about one resolution request."""

    profile_url: str
    platform: Platform
    http_client: HTTPClientManager
    config: ServerConfig
    show_id: Optional[str] = None

    def parse(self, feed_url: str) -> List[Episode]:
        """Fetch and parse ``feed_url``; empty on any failure."""
        return parse_feed(feed_url, self.http_client, self.config.max_episodes)


def extract_show_id(platform: Platform, url: str) -> Optional[str]:
    """Pull the platform's show identifier out of a profile URL."""
    pattern = platform.info.id_pattern
    if pattern is None:
        return None
    match = pattern.search(url)
    return match.group(1) if match else None


def basename(value: str) -> str:
    """Last ``/``-separated segment, ignoring trailing slashes."""
    return value.rstrip("/").rsplit("/", 1)[-1]


def path_basename(url: str) -> str:
    return basename(urlparse(url).path)


def host_name(url: str) -> str:
    return urlparse(url).hostname or ""


def url_basename(url: str) -> str:
    return basename(url)


class DiscoveryStep(ABC):
    """One heuristic in a platform's discovery cascade."""

    name = "step"

    @abstractmethod
    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        """Return episodes found by this heuristic, or an empty list."""


class StubInputStep(DiscoveryStep):
    """Short-circuit empty and example.com URLs to placeholder data."""

    name = "stub_input"

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        if ctx.profile_url and "example.com" not in ctx.profile_url:
            return []
        return create_placeholder_episodes(ctx.platform.info.source_label, "direct")


class FeedUrlStep(DiscoveryStep):
    """Treat the profile URL itself as the feed."""

    name = "feed_url"

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        return ctx.parse(ctx.profile_url)


class DirectFeedStep(DiscoveryStep):
    """Parse the profile URL directly when it is on the platform's feed host."""

    name = "direct_feed"

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        patterns = ctx.platform.info.feed_host_patterns
        if not any(pattern.search(ctx.profile_url) for pattern in patterns):
            return []
        return ctx.parse(ctx.profile_url)


class PageScrapeStep(DiscoveryStep):
    """
    Find the feed URL embedded in the profile page's inline JSON.

    Only runs when a show ID was extracted from the URL.
    """

    name = "page_scrape"

    def __init__(self, field_pattern: str):
        self.field_pattern = re.compile(field_pattern)

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        if not ctx.show_id:
            return []

        page = ctx.http_client.fetch_page(ctx.profile_url)
        if page is None:
            return []

        match = self.field_pattern.search(page)
        if not match:
            logger.debug(f"No embedded feed URL on {ctx.profile_url}")
            return []

        feed_url = match.group(1).replace("\\/", "/")
        log_with_context(
            logger,
            logging.INFO,
            "Found embedded feed URL",
            context={"profile_url": ctx.profile_url, "feed_url": feed_url}
        )
        return ctx.parse(feed_url)


class GuessedHostStep(DiscoveryStep):
    """Try well-known hosting providers' feed URLs built from the show ID."""

    name = "guessed_hosts"

    def __init__(self, templates: Sequence[str]):
        self.templates = tuple(templates)

    def candidate_urls(self, show_id: str) -> List[str]:
        return [template.format(id=show_id) for template in self.templates]

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        if not ctx.show_id:
            return []

        for feed_url in self.candidate_urls(ctx.show_id):
            episodes = ctx.parse(feed_url)
            if episodes:
                return episodes
        return []


class ItunesLookupStep(DiscoveryStep):
    """Ask the iTunes lookup API for the show's feed URL."""

    name = "itunes_lookup"

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        if not ctx.show_id:
            return []

        data = ctx.http_client.fetch_json(
            ctx.config.itunes_lookup_url,
            params={"id": ctx.show_id, "entity": "podcast"}
        )
        feed_url = _lookup_feed_url(data)
        if not feed_url:
            return []

        log_with_context(
            logger,
            logging.INFO,
            "iTunes lookup returned feed URL",
            context={"show_id": ctx.show_id, "feed_url": feed_url}
        )
        return ctx.parse(feed_url)


def _lookup_feed_url(data) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    results = data.get("results")
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        return None
    feed_url = results[0].get("feedUrl")
    return feed_url if isinstance(feed_url, str) and feed_url else None


class SniffStep(DiscoveryStep):
    """
    Scan the profile page for feed links and try them.

    Candidates on the platform's own feed hosts go first; after that a
    limited number of the remaining candidates are tried in page order.
    """

    name = "sniff"

    def __init__(self, priority_patterns: Sequence[Pattern[str]] = ()):
        self.priority_patterns = tuple(priority_patterns)

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        if FEED_PATH_PATTERN.search(urlparse(ctx.profile_url).path):
            episodes = ctx.parse(ctx.profile_url)
            if episodes:
                return episodes

        page = ctx.http_client.fetch_page(ctx.profile_url)
        if page is None:
            return []

        candidates = extract_feed_urls(page)
        log_with_context(
            logger,
            logging.INFO,
            "Sniffed feed candidates",
            context={"profile_url": ctx.profile_url, "candidate_count": len(candidates)}
        )

        tried = set()
        for candidate in candidates:
            if any(pattern.search(candidate) for pattern in self.priority_patterns):
                tried.add(candidate)
                episodes = ctx.parse(candidate)
                if episodes:
                    return episodes

        remaining = [c for c in candidates if c not in tried]
        for candidate in remaining[:ctx.config.max_sniffed_candidates]:
            episodes = ctx.parse(candidate)
            if episodes:
                return episodes
        return []


class PlaceholderStep(DiscoveryStep):
    """Last resort: placeholder episodes labelled with the platform and ID."""

    name = "placeholder"

    def __init__(self, fallback_id: Callable[[str], str]):
        self.fallback_id = fallback_id

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        show_id = ctx.show_id or self.fallback_id(ctx.profile_url)
        return create_placeholder_episodes(ctx.platform.info.source_label, show_id)


class SampleEpisodesStep(DiscoveryStep):
    """Last resort for Spotify-style platforms: the generic sample list."""

    name = "sample_episodes"

    def run(self, ctx: DiscoveryContext) -> List[Episode]:
        return create_sample_episodes()
