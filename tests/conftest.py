"""Shared fixtures and in-memory fakes for the pipeline ports."""

from datetime import datetime, timedelta, timezone

import pytest

from super_happy_dev.adapters.tts import write_wav
from super_happy_dev.domain.errors import ExtractionError, FeedError
from super_happy_dev.ports.interfaces import (
    IArticleExtractor,
    IFeedSource,
    IMediaHost,
    IScriptWriter,
    ISocialPoster,
    ISpeechSynthesizer,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_item(title, link=None, summary=None, hours_ago=1, now=NOW):
    return {
        "title": title,
        "link": link,
        "summary": summary,
        "published_at": now - timedelta(hours=hours_ago),
    }


class FakeFeedSource(IFeedSource):
    """Maps feed URL -> list of items, or an exception to raise.

    Unknown URLs return `default` (an empty feed unless given).
    """

    def __init__(self, feeds, default=None):
        self.feeds = feeds
        self.default = default or []
        self.calls = []

    def fetch_items(self, feed_url):
        self.calls.append(feed_url)
        result = self.feeds.get(feed_url, self.default)
        if isinstance(result, Exception):
            raise result
        return list(result)


class FakeExtractor(IArticleExtractor):
    def __init__(self, pages=None):
        self.pages = pages or {}
        self.calls = []

    def extract_text(self, url):
        self.calls.append(url)
        if url not in self.pages:
            raise ExtractionError(f"{url}: connection refused")
        return self.pages[url]


class FakeScriptWriter(IScriptWriter):
    def __init__(self, script="Speaker 1: Hola, bienvenidos al podcast de Super Happy Dev."):
        self.script = script
        self.calls = []

    def write_script(self, stories):
        self.calls.append(stories)
        return self.script


class FakeSpeechSynthesizer(ISpeechSynthesizer):
    def __init__(self, pcm=b"\x00\x01" * 240):
        self.pcm = pcm
        self.calls = []

    def synthesize(self, script, output_path):
        self.calls.append((script, output_path))
        return write_wav(output_path, self.pcm)


class FakeMediaHost(IMediaHost):
    def __init__(self, url="https://res.cloudinary.com/demo/video/upload/super-happy-dev/ep.wav"):
        self.url = url
        self.calls = []

    def upload_audio(self, file_path, public_id):
        self.calls.append((file_path, public_id))
        return self.url


class FakeSocialPoster(ISocialPoster):
    def __init__(self, url="https://mastodon.example/@shd/111"):
        self.url = url
        self.calls = []

    def post_status(self, text):
        self.calls.append(text)
        return self.url


@pytest.fixture
def fakes():
    """One fake per port, wired for a successful run over two feeds."""
    # the pipeline filters against the wall clock
    now = datetime.now(timezone.utc)
    feeds = {
        "https://a.example/feed": [
            make_item("Story A", link="https://a.example/1", summary="x" * 250, now=now),
            make_item("Story B", link="https://a.example/2", now=now),
            make_item("Story A again", link="https://a.example/1", now=now),
        ],
        "https://b.example/feed": FeedError("https://b.example/feed: connection refused"),
    }
    return {
        "feed_source": FakeFeedSource(feeds),
        "article_extractor": FakeExtractor({"https://a.example/2": "Full text of story B."}),
        "script_writer": FakeScriptWriter(),
        "speech_synthesizer": FakeSpeechSynthesizer(),
        "media_host": FakeMediaHost(),
        "social_poster": FakeSocialPoster(),
    }
