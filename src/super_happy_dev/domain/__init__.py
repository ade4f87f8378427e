"""Domain models and errors."""

from super_happy_dev.domain.errors import (
    ExtractionError,
    FeedError,
    NoRecentStoriesError,
    PipelineError,
    SpeechSynthesisError,
)
from super_happy_dev.domain.models import EnrichedStory, FeedItem, PublishedEpisode, Story

__all__ = [
    "EnrichedStory",
    "FeedItem",
    "PublishedEpisode",
    "Story",
    "PipelineError",
    "FeedError",
    "ExtractionError",
    "NoRecentStoriesError",
    "SpeechSynthesisError",
]
