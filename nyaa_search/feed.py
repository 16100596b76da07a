"""Tolerant parser for the Nyaa RSS feed.

The feed is read with regular expressions rather than an XML parser: only
the ``<item>`` fragments are looked at, and every field is pulled out of its
own fragment with :func:`~nyaa_search.text.extract_tag`. Items that lack a
title or an info hash are dropped, and an item that fails to parse is logged
and skipped without affecting the rest of the feed.
"""

import logging
import re
from collections.abc import Iterator
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from urllib.parse import quote

from .classifier import ReleaseClassifier
from .models import ReleaseRecord
from .text import decode_html, extract_tag, parse_int, parse_size

logger = logging.getLogger(__name__)

ITEM_RE = re.compile(r"<item(?:\s[^>]*)?>(.*?)</item>", re.IGNORECASE | re.DOTALL)

# encodeURIComponent leaves these unescaped
URI_SAFE = "-_.!~*'()"


def build_magnet(info_hash: str, title: str) -> str:
    """Build a magnet URI from an info hash and a raw title."""
    return f"magnet:?xt=urn:btih:{info_hash}&dn={quote(title, safe=URI_SAFE)}"


def parse_date(value: str | None, default: datetime) -> datetime:
    """Parse an RFC 822 ``pubDate``, returning ``default`` when it can't."""
    if not value:
        return default
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return default
    if parsed is None:
        return default
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def iter_items(body: str) -> Iterator[str]:
    """Yield the inner markup of each ``<item>`` in document order."""
    for match in ITEM_RE.finditer(body):
        yield match.group(1)


class FeedParser:
    """Turns a raw feed body into release records."""

    def __init__(self, classifier: ReleaseClassifier | None = None):
        self.classifier = classifier or ReleaseClassifier()

    def parse(self, body: str) -> list[ReleaseRecord]:
        """Parse every item of ``body``."""
        return list(self.iter_records(body))

    def iter_records(self, body: str) -> Iterator[ReleaseRecord]:
        """Lazily parse the items of ``body``."""
        if not body:
            return
        now = datetime.now(timezone.utc)
        for index, fragment in enumerate(iter_items(body)):
            try:
                record = self.parse_item(fragment, now)
            except Exception as e:
                logger.warning("Skipping feed item %d: %s", index, e)
                continue
            if record is not None:
                yield record

    def parse_item(self, fragment: str, now: datetime) -> ReleaseRecord | None:
        """Parse one item fragment. Returns None when a required field is missing."""
        title = extract_tag(fragment, "title")
        info_hash = extract_tag(fragment, "nyaa:infoHash")
        if not title or not info_hash:
            logger.debug("Dropping item without title or info hash: %r", title)
            return None

        link = extract_tag(fragment, "link")
        category = extract_tag(fragment, "nyaa:category") or ""
        seeders = parse_int(extract_tag(fragment, "nyaa:seeders"))
        display_title = decode_html(title)
        info_hash = info_hash.lower()

        return ReleaseRecord(
            title=display_title,
            link=link or build_magnet(info_hash, title),
            hash=info_hash,
            date=parse_date(extract_tag(fragment, "pubDate"), now),
            seeders=seeders,
            leechers=parse_int(extract_tag(fragment, "nyaa:leechers")),
            downloads=parse_int(extract_tag(fragment, "nyaa:downloads")),
            size=parse_size(extract_tag(fragment, "nyaa:size")),
            verified=self.classifier.is_verified(category, display_title, seeders),
            category=category,
        )


def parse_feed(body: str, classifier: ReleaseClassifier | None = None) -> list[ReleaseRecord]:
    """Parse a feed body with a default parser."""
    return FeedParser(classifier).parse(body)
