"""
Adapters – concrete implementations of ports.
Production wiring: feedparser feeds, readability extraction, Gemini script
and speech, Cloudinary hosting, Mastodon announcements.
"""

from super_happy_dev.adapters.news import FeedparserSource
from super_happy_dev.adapters.articles import ReadabilityExtractor
from super_happy_dev.adapters.content import GeminiScriptWriter
from super_happy_dev.adapters.tts import GeminiSpeechSynthesizer
from super_happy_dev.adapters.upload import CloudinaryUploader
from super_happy_dev.adapters.social import MastodonPoster


def default_adapters(**overrides):
    """
    Build default adapter instances (credentials from config / environment).
    Overrides: feed_source=..., script_writer=..., etc. for testing.
    Overridden adapters are never constructed.
    """
    factories = {
        "feed_source": FeedparserSource,
        "article_extractor": ReadabilityExtractor,
        "script_writer": GeminiScriptWriter,
        "speech_synthesizer": GeminiSpeechSynthesizer,
        "media_host": CloudinaryUploader,
        "social_poster": MastodonPoster,
    }
    adapters = dict(overrides)
    for name, factory in factories.items():
        if name not in adapters:
            adapters[name] = factory()
    return adapters
