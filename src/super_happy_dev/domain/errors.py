"""Pipeline exceptions."""


class PipelineError(Exception):
    """Base class for errors raised by the episode pipeline."""


class FeedError(PipelineError):
    """A single feed could not be fetched or parsed (the feed is skipped)."""


class ExtractionError(PipelineError):
    """Readable text could not be extracted from an article page."""


class NoRecentStoriesError(PipelineError):
    """No feed produced a story inside the recency window."""


class SpeechSynthesisError(PipelineError):
    """The speech model returned no audio payload."""
