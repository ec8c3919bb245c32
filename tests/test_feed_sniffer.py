"""
Unit tests for the HTML feed sniffer.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hypothesis import given, strategies as st

from podcast_resolver.rss.sniffer import extract_feed_urls


class TestLinkTags:
    """Pass 1: <link> tags with feed MIME types."""

    def test_link_tag_and_inline_url(self):
        html = (
            '<html><head>'
            '<link rel="alternate" type="application/rss+xml" href="https://a.example/feed.xml">'
            '</head><body>Subscribe at https://b.example/feeds/x today</body></html>'
        )

        assert extract_feed_urls(html) == [
            "https://a.example/feed.xml",
            "https://b.example/feeds/x",
        ]

    def test_atom_link_single_quotes_case_insensitive(self):
        html = "<LINK REL='alternate' TYPE='application/atom+xml' HREF='https://blog.test/atom.xml'>"

        assert extract_feed_urls(html) == ["https://blog.test/atom.xml"]

    def test_relative_href_is_kept_verbatim(self):
        html = '<link type="application/rss+xml" href="/podcast.rss">'

        assert extract_feed_urls(html) == ["/podcast.rss"]

    def test_href_before_type(self):
        html = '<link rel="alternate" href="https://cdn.show.test/podcast.xml" type="application/rss+xml">'

        assert extract_feed_urls(html) == ["https://cdn.show.test/podcast.xml"]

    def test_type_with_parameters(self):
        html = '<link href="https://cdn.show.test/episodes" type="Application/RSS+XML; charset=utf-8" />'

        assert extract_feed_urls(html) == ["https://cdn.show.test/episodes"]

    def test_link_without_href_ignored(self):
        html = '<link rel="alternate" type="application/rss+xml">'

        assert extract_feed_urls(html) == []

    def test_other_link_types_ignored(self):
        html = '<link rel="stylesheet" type="text/css" href="https://cdn.test/style.css">'

        assert extract_feed_urls(html) == []


class TestInlineUrls:
    """Pass 2: bare feed-looking URLs."""

    def test_feed_path_prefixes(self):
        html = (
            '<a href="https://show.test/feed/podcast">RSS</a>'
            '<script>var u = "https://media.show.test/feeds/episodes.rss";</script>'
        )

        assert extract_feed_urls(html) == [
            "https://show.test/feed/podcast",
            "https://media.show.test/feeds/episodes.rss",
        ]

    def test_entities_decoded(self):
        html = '<a href="https://show.test/feed?format=rss&amp;page=1">RSS</a>'

        assert extract_feed_urls(html) == ["https://show.test/feed?format=rss&page=1"]

    def test_non_feed_urls_ignored(self):
        html = '<a href="https://show.test/about">About</a> https://show.test/episodes/1'

        assert extract_feed_urls(html) == []


def test_duplicates_removed_in_first_seen_order():
    html = (
        '<link type="application/rss+xml" href="https://show.test/feed.xml">'
        '<a href="https://show.test/feed.xml">RSS</a>'
        '<a href="https://other.test/feeds/main">Other</a>'
        '<a href="https://show.test/feed.xml">RSS again</a>'
    )

    assert extract_feed_urls(html) == [
        "https://show.test/feed.xml",
        "https://other.test/feeds/main",
    ]


def test_empty_document():
    assert extract_feed_urls("") == []


@given(text=st.text(alphabet=st.characters(blacklist_categories=('Cs',)), max_size=500))
def test_result_is_always_unique(text: str):
    """Whatever the input, candidates are unique."""
    candidates = extract_feed_urls(text)

    assert len(candidates) == len(set(candidates))
