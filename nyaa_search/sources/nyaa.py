"""Nyaa RSS torrent source."""

import logging
from urllib.parse import quote

from ..config.schema import FeedConfig
from ..feed import URI_SAFE, FeedParser
from ..models import ReleaseRecord
from .base import FetchText, Source

logger = logging.getLogger(__name__)


class NyaaSource(Source):
    """nyaa.si torrent source via its RSS feed."""

    name = "Nyaa"
    version = "1.0.0"

    def __init__(
        self,
        config: FeedConfig | None = None,
        parser: FeedParser | None = None,
        fetch: FetchText | None = None,
    ):
        self.config = config or FeedConfig()
        super().__init__(
            fetch=fetch,
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout,
        )
        self.base_url = self.config.base_url.rstrip("/")
        self.parser = parser or FeedParser()

    def feed_url(self, query: str) -> str:
        """Build the RSS search URL for ``query``."""
        return (
            f"{self.base_url}/?page=rss&q={quote(query, safe=URI_SAFE)}"
            f"&c={self.config.category}&f={self.config.filter}"
        )

    def search(self, query: str) -> list[ReleaseRecord]:
        """Fetch and parse the feed for ``query``."""
        url = self.feed_url(query)
        logger.debug("%s feed request: %s", self.name, url)
        body = self.fetch_text(url)
        results = self.parser.parse(body)
        logger.debug("%s parsed %d releases for '%s'", self.name, len(results), query)
        return results
