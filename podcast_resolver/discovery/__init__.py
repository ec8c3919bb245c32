"""Feed discovery: per-platform cascades and request routing."""

from .placeholder import create_placeholder_episodes, create_sample_episodes
from .resolver import PodcastResolver
from .steps import DiscoveryContext, DiscoveryStep
from .strategies import STRATEGIES, run_strategy

__all__ = [
    "PodcastResolver",
    "DiscoveryContext",
    "DiscoveryStep",
    "STRATEGIES",
    "run_strategy",
    "create_placeholder_episodes",
    "create_sample_episodes",
]
