"""Feed URL discovery inside arbitrary HTML."""

import html
import re
from typing import List

from bs4 import BeautifulSoup


FEED_LINK_TYPES = ("application/rss+xml", "application/atom+xml")

# Inline mentions such as https://example.org/feed/podcast
INLINE_FEED_PATTERN = re.compile(
    r"""https?://[\w.-]+/(?:feed|feeds)[^"'\s<>]*""",
    re.IGNORECASE
)


def feed_link_hrefs(page_html: str) -> List[str]:
    """Return the ``href`` of every RSS or Atom ``<link>`` tag, in document order."""
    soup = BeautifulSoup(page_html, "html.parser")
    hrefs = []
    for link in soup.find_all("link"):
        # type="application/rss+xml; charset=utf-8" still counts
        link_type = (link.get("type") or "").split(";")[0].strip().lower()
        href = link.get("href")
        if link_type in FEED_LINK_TYPES and href:
            hrefs.append(href.strip())
    return hrefs


def extract_feed_urls(page_html: str) -> List[str]:
    """
    Collect candidate feed URLs from an HTML document.

    Feed ``<link>`` tags come first, then bare feed-looking URLs found
    anywhere in the markup. Candidates are entity-decoded and deduplicated
    in first-seen order; none of them is checked to actually be a feed.

    Args:
        page_html: HTML document

    Returns:
        List of candidate feed URLs
    """
    # BeautifulSoup already decodes entities in attribute values
    found = feed_link_hrefs(page_html)
    found.extend(html.unescape(m.group(0)) for m in INLINE_FEED_PATTERN.finditer(page_html))

    candidates: List[str] = []
    seen = set()
    for url in found:
        if url not in seen:
            seen.add(url)
            candidates.append(url)
    return candidates
