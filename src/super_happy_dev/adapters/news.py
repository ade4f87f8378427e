"""IFeedSource adapter: requests + feedparser."""

from datetime import datetime, timezone
from typing import Any, List, Optional

import feedparser
import requests
from bs4 import BeautifulSoup

from super_happy_dev import config
from super_happy_dev.domain.errors import FeedError
from super_happy_dev.domain.models import FeedItem
from super_happy_dev.ports.interfaces import IFeedSource


def html_to_snippet(html: Optional[str]) -> Optional[str]:
    """Strip markup from a feed summary and collapse whitespace."""
    if not html:
        return None
    text = BeautifulSoup(html, "html.parser").get_text(" ", strip=True)
    text = " ".join(text.split())
    return text or None


def entry_published_at(entry: Any, now: Optional[datetime] = None) -> datetime:
    """Entry publish time in UTC; falls back to `now` when the feed gives none."""
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if parsed:
        # feedparser normalizes *_parsed to UTC struct_time
        return datetime(*parsed[:6], tzinfo=timezone.utc)
    return now or datetime.now(timezone.utc)


class FeedparserSource(IFeedSource):
    """Fetches a feed over HTTP and parses it with feedparser."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: int = config.REQUEST_TIMEOUT,
    ):
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": config.USER_AGENT})
        self._timeout = timeout

    def fetch_items(self, feed_url: str) -> List[FeedItem]:
        try:
            resp = self._session.get(feed_url, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FeedError(f"{feed_url}: {e}") from e

        feed = feedparser.parse(resp.content)
        # bozo alone is not fatal: many real feeds have minor encoding issues
        if feed.bozo and not feed.entries:
            reason = getattr(feed, "bozo_exception", "parsing error")
            raise FeedError(f"{feed_url}: {reason}")

        now = datetime.now(timezone.utc)
        items: List[FeedItem] = []
        for entry in feed.entries:
            items.append({
                "title": (entry.get("title") or "").strip(),
                "link": entry.get("link") or None,
                "summary": html_to_snippet(entry.get("summary")),
                "published_at": entry_published_at(entry, now),
            })
        return items
