"""Substitute episodes returned when no feed could be found."""

import random
from datetime import date, timedelta
from typing import List, Optional, Sequence

from ..models.episode import Episode


PLACEHOLDER_TITLES = (
    "Episode 1: Introduction",
    "Episode 2: Getting Started",
    "Episode 3: Deep Dive",
    "Episode 4: Advanced Topics",
    "Episode 5: Case Studies",
    "Episode 6: Best Practices",
    "Episode 7: Common Mistakes",
    "Episode 8: Expert Interviews",
    "Episode 9: Future Trends",
    "Episode 10: Conclusion",
)

SAMPLE_TITLES = (
    "The Future of Technology",
    "Building Better Habits",
    "Mindfulness in Daily Life",
    "Creative Problem Solving",
    "Leadership in the Digital Age",
    "Health and Wellness Tips",
    "Financial Planning Basics",
    "Travel Stories and Adventures",
    "Book Reviews and Recommendations",
    "Interview with Industry Experts",
    "Behind the Scenes Stories",
    "Weekly News Roundup",
    "Deep Dive into Current Events",
    "Personal Development Journey",
    "Technology Trends Discussion",
    "Art and Culture Exploration",
    "Science and Discovery",
    "History and Lessons Learned",
    "Music and Entertainment",
    "Food and Cooking Adventures",
)

SAMPLE_AUDIO_URLS = (
    "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav",
    "https://www.soundjay.com/misc/sounds/bell-ringing-04.wav",
    "https://www.soundjay.com/misc/sounds/bell-ringing-03.wav",
    "https://www.soundjay.com/misc/sounds/bell-ringing-02.wav",
    "https://www.soundjay.com/misc/sounds/bell-ringing-01.wav",
    "https://file-examples.com/storage/fe68c1b1a3a3b1b1b1b1b1b/2017/11/file_example_MP3_700KB.mp3",
    "https://file-examples.com/storage/fe68c1b1a3a3b1b1b1b1b1b/2017/11/file_example_MP3_1MG.mp3",
    "https://file-examples.com/storage/fe68c1b1a3a3b1b1b1b1b1b/2017/11/file_example_MP3_2MG.mp3",
    "https://www.learningcontainer.com/wp-content/uploads/2020/02/Kalimba.mp3",
    "https://www.learningcontainer.com/wp-content/uploads/2020/02/Kalimba.mp3",
)

SAMPLE_DURATIONS = (
    "25:30", "32:15", "41:20", "28:45", "35:10",
    "29:55", "38:25", "31:40", "27:15", "44:30",
)

PLACEHOLDER_DESCRIPTION = (
    "This is a placeholder episode from {platform} (ID: {id}). "
    "The RSS feed could not be automatically detected. "
    "Please check the podcast URL or contact support."
)

SAMPLE_DESCRIPTION = (
    "This is a sample podcast episode description for {title}. "
    "Join us as we explore this fascinating topic in detail."
)


def create_placeholder_episodes(
    platform_label: str,
    show_id: str,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None
) -> List[Episode]:
    """
    Build the ten placeholder episodes for a show whose feed was not found.

    Args:
        platform_label: Platform name shown in the descriptions
        show_id: Show identifier, or a fragment of the profile URL
        today: Date of the first episode (defaults to the current date)
        rng: Random source for the durations

    Returns:
        Ten episodes dated one day apart, newest first
    """
    description = PLACEHOLDER_DESCRIPTION.format(platform=platform_label, id=show_id)
    return _build(
        PLACEHOLDER_TITLES,
        lambda title: description,
        today,
        rng
    )


def create_sample_episodes(
    today: Optional[date] = None,
    rng: Optional[random.Random] = None
) -> List[Episode]:
    """Build the twenty generic sample episodes."""
    return _build(
        SAMPLE_TITLES,
        lambda title: SAMPLE_DESCRIPTION.format(title=title),
        today,
        rng
    )


def _build(titles: Sequence[str], describe, today, rng) -> List[Episode]:
    today = today or date.today()
    rng = rng or random.Random()
    return [
        Episode(
            title=title,
            audio_url=SAMPLE_AUDIO_URLS[index % len(SAMPLE_AUDIO_URLS)],
            description=describe(title),
            duration=rng.choice(SAMPLE_DURATIONS),
            date=(today - timedelta(days=index)).strftime("%Y-%m-%d")
        )
        for index, title in enumerate(titles)
    ]
