"""Search orchestration for nyaa-search."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import replace

from .classifier import ReleaseClassifier
from .config import AppConfig
from .feed import FeedParser
from .models import ReleaseRecord, ReleaseType, SearchRequest
from .query import build_batch_query, build_movie_query, build_single_query
from .sources import NyaaSource, Source
from .sources.base import FetchText, add_trackers

logger = logging.getLogger(__name__)


def apply_exclusions(
    results: Iterable[ReleaseRecord], exclusions: Iterable[str]
) -> list[ReleaseRecord]:
    """Drop results whose title contains any exclusion, ignoring case.

    An empty exclusion is contained in every title, so it drops everything.
    """
    terms = [e.lower() for e in exclusions]
    if not terms:
        return list(results)
    return [r for r in results if not any(t in r.title.lower() for t in terms)]


class SearchOrchestrator:
    """Runs single-episode, batch and movie searches against one source.

    None of the public coroutines raise: a failed fetch or a request that
    can't be searched for yields an empty list.
    """

    def __init__(self, source: Source, classifier: ReleaseClassifier | None = None):
        self.source = source
        self.classifier = classifier or ReleaseClassifier()

    async def single(self, request: SearchRequest) -> list[ReleaseRecord]:
        """Search for a single episode, leaving out batches."""
        query = build_single_query(request)
        if query is None:
            return []
        results = await self.search(query, request.exclusions)
        return [r for r in results if not self.classifier.is_batch(r.title)]

    async def batch(self, request: SearchRequest) -> list[ReleaseRecord]:
        """Search for batch releases."""
        query = build_batch_query(request)
        if query is None:
            return []
        results = await self.search(query, request.exclusions)
        return [
            replace(r, release_type=ReleaseType.BATCH)
            for r in results
            if self.classifier.is_batch(r.title)
        ]

    async def movie(self, request: SearchRequest) -> list[ReleaseRecord]:
        """Search for movies."""
        query = build_movie_query(request)
        if query is None:
            return []
        return await self.search(query, request.exclusions)

    async def search(
        self, query: str, exclusions: Iterable[str] = ()
    ) -> list[ReleaseRecord]:
        """Fetch, parse and filter results for ``query``."""
        loop = asyncio.get_running_loop()
        try:
            # Run the blocking fetch in a thread
            results = await loop.run_in_executor(None, self.source.search, query)
        except Exception as e:
            logger.warning("%s search error for '%s': %s", self.source.name, query, e)
            return []

        kept = apply_exclusions(results, exclusions)
        logger.debug(
            "%s search '%s': %d results, %d after exclusions",
            self.source.name,
            query,
            len(results),
            len(kept),
        )
        return kept

    @staticmethod
    def get_magnet(record: ReleaseRecord) -> str:
        """Get the link for a result, with trackers added to magnet URIs."""
        if record.link.startswith("magnet:"):
            return add_trackers(record.link)
        return record.link


def create_orchestrator(
    config: AppConfig | None = None, fetch: FetchText | None = None
) -> SearchOrchestrator:
    """Build a ready-to-use orchestrator for the Nyaa feed."""
    config = config or AppConfig()
    classifier = ReleaseClassifier(config.classifier)
    source = NyaaSource(config.feed, parser=FeedParser(classifier), fetch=fetch)
    return SearchOrchestrator(source, classifier)
