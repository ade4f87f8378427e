"""Article enrichment – give every story a body for the script writer."""

from typing import List

from super_happy_dev import config
from super_happy_dev.domain.errors import ExtractionError
from super_happy_dev.domain.models import EnrichedStory, Story
from super_happy_dev.ports.interfaces import IArticleExtractor


def enrich_story(
    story: Story,
    extractor: IArticleExtractor,
    min_summary_chars: int = config.SUMMARY_MIN_CHARS,
    max_body_chars: int = config.BODY_MAX_CHARS,
) -> EnrichedStory:
    """
    Use the feed summary when it is long enough, otherwise the linked page's
    readable text. Extraction failures give an empty body.
    """
    summary = story.get("summary") or ""
    if len(summary) > min_summary_chars:
        body = summary
    else:
        try:
            body = extractor.extract_text(story.get("link") or "")
        except ExtractionError as e:
            print(f"  ⚠️  No article text for '{story['title'][:50]}': {str(e)[:80]}")
            body = ""
    enriched: EnrichedStory = {**story, "body": (body or "")[:max_body_chars]}
    return enriched


def enrich_stories(stories: List[Story], extractor: IArticleExtractor) -> List[EnrichedStory]:
    """Enrich stories one after another, keeping their order."""
    return [enrich_story(story, extractor) for story in stories]
