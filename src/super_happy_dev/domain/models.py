"""Domain models – dict-compatible for the episode pipeline."""

from datetime import datetime
from typing import Optional, TypedDict


class FeedItem(TypedDict):
    """One parsed feed entry."""
    title: str
    link: Optional[str]
    summary: Optional[str]
    published_at: datetime  # timezone-aware, UTC


# A FeedItem that survived the recency filter and deduplication
Story = FeedItem


class EnrichedStory(FeedItem):
    """A story plus the text the script writer works from."""
    body: str  # at most BODY_MAX_CHARS characters


class PublishedEpisode(TypedDict):
    """Externally visible result of one run."""
    audio_path: str
    cdn_url: str
    status_url: str
