"""
Property-based tests for the placeholder generator.
"""

import random
from datetime import date, timedelta

from hypothesis import given, strategies as st

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from podcast_resolver.discovery.placeholder import (
    PLACEHOLDER_TITLES,
    SAMPLE_AUDIO_URLS,
    SAMPLE_DURATIONS,
    SAMPLE_TITLES,
    create_placeholder_episodes,
    create_sample_episodes,
)


def test_acast_placeholder_shape():
    """placeholder("Acast", "abc123") returns ten well-formed episodes."""
    today = date.today()

    episodes = create_placeholder_episodes("Acast", "abc123")

    assert len(episodes) == 10
    assert [ep.title for ep in episodes] == list(PLACEHOLDER_TITLES)
    assert all(ep.audio_url in SAMPLE_AUDIO_URLS for ep in episodes)
    assert [ep.date for ep in episodes] == [
        (today - timedelta(days=i)).strftime("%Y-%m-%d") for i in range(10)
    ]
    assert episodes[0].description.startswith(
        "This is a placeholder episode from Acast (ID: abc123)."
    )


# Property: Placeholder Labels Embedded Verbatim
@given(
    label=st.text(min_size=1, max_size=40),
    show_id=st.text(max_size=40),
    seed=st.integers()
)
def test_placeholder_properties(label: str, show_id: str, seed: int):
    """
    For any label and ID, the placeholder list has ten episodes with the
    label and ID embedded in every description, audio URLs cycling through
    the sample set and durations drawn from the fixed set.
    """
    today = date(2024, 3, 1)

    episodes = create_placeholder_episodes(label, show_id, today=today, rng=random.Random(seed))

    assert len(episodes) == 10
    for index, episode in enumerate(episodes):
        assert f"from {label} (ID: {show_id})" in episode.description
        assert episode.audio_url == SAMPLE_AUDIO_URLS[index % len(SAMPLE_AUDIO_URLS)]
        assert episode.duration in SAMPLE_DURATIONS
        assert episode.date == (today - timedelta(days=index)).isoformat()


def test_dates_strictly_descending():
    episodes = create_placeholder_episodes("Castos", "x", today=date(2024, 1, 3))

    assert [ep.date for ep in episodes[:4]] == ["2024-01-03", "2024-01-02", "2024-01-01", "2023-12-31"]


def test_sample_episodes():
    """The sample list has twenty titles cycling through ten audio URLs."""
    episodes = create_sample_episodes(today=date(2024, 6, 30), rng=random.Random(1))

    assert [ep.title for ep in episodes] == list(SAMPLE_TITLES)
    assert len(episodes) == 20
    assert episodes[10].audio_url == episodes[0].audio_url == SAMPLE_AUDIO_URLS[0]
    assert episodes[19].audio_url == SAMPLE_AUDIO_URLS[9]
    assert episodes[19].date == "2024-06-11"
    assert episodes[3].description == (
        "This is a sample podcast episode description for Creative Problem Solving. "
        "Join us as we explore this fascinating topic in detail."
    )
    assert all(ep.duration in SAMPLE_DURATIONS for ep in episodes)


def test_durations_vary_with_random_source():
    """Durations are picked per episode, not once per list."""
    durations = {
        ep.duration
        for seed in range(5)
        for ep in create_sample_episodes(rng=random.Random(seed))
    }

    assert len(durations) > 1
