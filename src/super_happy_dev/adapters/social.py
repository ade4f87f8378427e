"""ISocialPoster adapter using Mastodon.py."""

from typing import Any, Optional

from mastodon import Mastodon

from super_happy_dev import config
from super_happy_dev.ports.interfaces import ISocialPoster


class MastodonPoster(ISocialPoster):
    """Posts public statuses to a Mastodon instance."""

    def __init__(
        self,
        client: Optional[Any] = None,
        api_base_url: str = config.MASTODON_URL,
        access_token: str = config.MASTODON_TOKEN,
    ):
        # version_check_mode="none" keeps construction offline
        self._client = client or Mastodon(
            access_token=access_token,
            api_base_url=api_base_url,
            version_check_mode="none",
        )

    def post_status(self, text: str) -> str:
        status = self._client.status_post(text, visibility="public")
        return status["url"]
