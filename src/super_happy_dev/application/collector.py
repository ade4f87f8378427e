"""
Feed collection – fetch every configured feed, keep recent entries,
deduplicate across feeds and cap the story count.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

from super_happy_dev import config
from super_happy_dev.domain.errors import FeedError, NoRecentStoriesError
from super_happy_dev.domain.models import FeedItem, Story
from super_happy_dev.ports.interfaces import IFeedSource


def story_key(item: FeedItem) -> str:
    """Dedup key: link when present, otherwise title."""
    return item.get("link") or item.get("title") or ""


def dedupe_stories(items: Iterable[FeedItem]) -> List[Story]:
    """First occurrence wins; insertion order is preserved."""
    unique: Dict[str, Story] = {}
    for item in items:
        key = story_key(item)
        if key not in unique:
            unique[key] = item
    return list(unique.values())


def collect_recent_stories(
    source: IFeedSource,
    feed_urls: Iterable[str] = config.RSS_FEEDS,
    now: Optional[datetime] = None,
    hours: int = config.RECENCY_HOURS,
    limit: int = config.MAX_STORIES,
) -> List[Story]:
    """
    Collect up to `limit` unique stories published in the last `hours` hours.

    Feeds are read in the given order, so an earlier feed wins when the same
    story appears twice. A feed that fails is skipped. Items without a publish
    date count as published now (the source fills that in); the cutoff itself
    is inclusive.

    Raises NoRecentStoriesError if nothing qualifies.
    """
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(hours=hours)

    recent: List[FeedItem] = []
    skipped = 0
    for feed_url in feed_urls:
        try:
            items = source.fetch_items(feed_url)
        except FeedError as e:
            skipped += 1
            print(f"  ⚠️  Skipping feed: {str(e)[:100]}")
            continue
        fresh = [item for item in items if item["published_at"] >= cutoff]
        print(f"  ✅ {len(fresh)} recent of {len(items)} entries from {feed_url}")
        recent.extend(fresh)

    stories = dedupe_stories(recent)[:limit]
    if skipped:
        print(f"  ⚠️  {skipped} feed(s) skipped")
    if not stories:
        raise NoRecentStoriesError(
            f"No stories from the last {hours}h in the configured feeds."
        )
    return stories
