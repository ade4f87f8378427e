"""IArticleExtractor adapter: requests + readability-lxml."""

from typing import Optional

import requests
from bs4 import BeautifulSoup
from readability import Document

from super_happy_dev import config
from super_happy_dev.domain.errors import ExtractionError
from super_happy_dev.ports.interfaces import IArticleExtractor


class ReadabilityExtractor(IArticleExtractor):
    """Downloads an article page and keeps only its main content as plain text."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: int = config.REQUEST_TIMEOUT,
    ):
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": config.USER_AGENT})
        self._timeout = timeout

    def extract_text(self, url: str) -> str:
        if not url:
            raise ExtractionError("story has no link")
        try:
            resp = self._session.get(url, timeout=self._timeout, allow_redirects=True)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise ExtractionError(f"{url}: {e}") from e

        try:
            content_html = Document(resp.text).summary()
        except Exception as e:
            # readability raises its own Unparseable plus assorted lxml errors
            raise ExtractionError(f"{url}: {e}") from e

        text = BeautifulSoup(content_html, "html.parser").get_text(" ", strip=True)
        if not text:
            raise ExtractionError(f"{url}: no readable content")
        return text.strip()
