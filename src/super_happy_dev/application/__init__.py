"""Application layer – use cases and pipeline orchestration."""

from super_happy_dev.application.collector import collect_recent_stories
from super_happy_dev.application.enricher import enrich_stories, enrich_story
from super_happy_dev.application.pipeline import EpisodePipeline

__all__ = ["EpisodePipeline", "collect_recent_stories", "enrich_stories", "enrich_story"]
