"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
"""

from abc import ABC, abstractmethod
from typing import List

from super_happy_dev.domain.models import EnrichedStory, FeedItem


class IFeedSource(ABC):
    """Syndication feed reader (RSS/Atom)."""

    @abstractmethod
    def fetch_items(self, feed_url: str) -> List[FeedItem]:
        """Fetch and parse one feed. Raises FeedError on any failure."""
        pass


class IArticleExtractor(ABC):
    """Main-content extraction for an article page."""

    @abstractmethod
    def extract_text(self, url: str) -> str:
        """Return the page's readable text. Raises ExtractionError on any failure."""
        pass


class IScriptWriter(ABC):
    """Generative text model that turns stories into a two-speaker dialogue."""

    @abstractmethod
    def write_script(self, stories: List[EnrichedStory]) -> str:
        """Return the dialogue script, or an empty string if the model gave no text."""
        pass


class ISpeechSynthesizer(ABC):
    """Generative speech model: script text -> audio file."""

    @abstractmethod
    def synthesize(self, script: str, output_path: str) -> str:
        """Write a playable audio file to output_path (closed on return) and return the path."""
        pass


class IMediaHost(ABC):
    """Public hosting for episode audio (e.g. Cloudinary)."""

    @abstractmethod
    def upload_audio(self, file_path: str, public_id: str) -> str:
        """Upload the file and return its public URL."""
        pass


class ISocialPoster(ABC):
    """Social network announcements (e.g. Mastodon)."""

    @abstractmethod
    def post_status(self, text: str) -> str:
        """Post a public status and return its URL."""
        pass
