"""Per-platform discovery cascades."""

import logging
import re
import time
from typing import Dict, List

from ..models.episode import Episode
from ..models.platform import Platform
from ..utils.logging import get_logger, log_with_context
from .steps import (
    DirectFeedStep,
    DiscoveryContext,
    DiscoveryStep,
    FeedUrlStep,
    GuessedHostStep,
    ItunesLookupStep,
    PageScrapeStep,
    PlaceholderStep,
    SampleEpisodesStep,
    SniffStep,
    StubInputStep,
    host_name,
    path_basename,
    url_basename,
)


logger = get_logger("DiscoveryStrategies")


# Hosting providers tried, in order, with a Spotify show ID
SPOTIFY_FEED_TEMPLATES = (
    "https://feeds.megaphone.fm/spotify-{id}",
    "https://feeds.simplecast.com/{id}",
    "https://feeds.buzzsprout.com/{id}",
    "https://feeds.libsyn.com/{id}",
    "https://feeds.captivate.fm/{id}",
    "https://feeds.transistor.fm/{id}",
    "https://feeds.anchor.fm/{id}",
    "https://feeds.acast.com/{id}",
    "https://feeds.podbean.com/{id}",
    "https://feeds.soundcloud.com/users/soundcloud:users:{id}/sounds.rss",
)


def _priority(*patterns: str):
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


_SPOTIFY_STEPS: List[DiscoveryStep] = [
    PageScrapeStep(r'"rss_url":"([^"]+)"'),
    GuessedHostStep(SPOTIFY_FEED_TEMPLATES),
    SampleEpisodesStep(),
]

STRATEGIES: Dict[Platform, List[DiscoveryStep]] = {
    Platform.SPOTIFY: _SPOTIFY_STEPS,
    Platform.POCKETCASTS: _SPOTIFY_STEPS,
    Platform.OVERCAST: [
        PageScrapeStep(r'"feed_url":"([^"]+)"'),
        PlaceholderStep(path_basename),
    ],
    Platform.APPLE: [
        PageScrapeStep(r'"feedUrl":"([^"]+)"'),
        ItunesLookupStep(),
        PlaceholderStep(path_basename),
    ],
    Platform.ACAST: [
        DirectFeedStep(),
        SniffStep(_priority(r"feeds\.acast\.com")),
        PlaceholderStep(path_basename),
    ],
    Platform.CASTOS: [
        DirectFeedStep(),
        SniffStep(_priority(r"feeds\.castos\.com", r"/feed/podcast")),
        PlaceholderStep(path_basename),
    ],
    Platform.LIBSYN: [
        DirectFeedStep(),
        SniffStep(_priority(r"feeds\.libsyn\.com", r"\.libsyn\.com/rss")),
        PlaceholderStep(host_name),
    ],
    Platform.TRANSISTOR: [
        DirectFeedStep(),
        SniffStep(_priority(r"feeds\.transistor\.fm")),
        PlaceholderStep(path_basename),
    ],
    Platform.RSS: [
        StubInputStep(),
        FeedUrlStep(),
        PlaceholderStep(url_basename),
    ],
}


def run_strategy(ctx: DiscoveryContext) -> List[Episode]:
    """
    Run the platform's steps in order until one yields episodes.

    Args:
        ctx: Discovery context for the request

    Returns:
        Episodes from the first successful step, or an empty list
    """
    for step in STRATEGIES[ctx.platform]:
        start_time = time.time()
        episodes = step.run(ctx)
        execution_time_ms = (time.time() - start_time) * 1000

        log_with_context(
            logger,
            logging.INFO if episodes else logging.DEBUG,
            "Discovery step finished",
            context={
                "platform": ctx.platform.value,
                "step": step.name,
                "episode_count": len(episodes)
            },
            execution_time_ms=execution_time_ms
        )
        if episodes:
            return episodes
    return []
