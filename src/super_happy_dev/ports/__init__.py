"""Ports (interfaces) – depend on these, implement in adapters."""

from super_happy_dev.ports.interfaces import (
    IFeedSource,
    IArticleExtractor,
    IScriptWriter,
    ISpeechSynthesizer,
    IMediaHost,
    ISocialPoster,
)

__all__ = [
    "IFeedSource",
    "IArticleExtractor",
    "IScriptWriter",
    "ISpeechSynthesizer",
    "IMediaHost",
    "ISocialPoster",
]
