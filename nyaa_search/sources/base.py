"""Base class for torrent feed sources."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from urllib.parse import quote

import requests

from ..config.schema import DEFAULT_USER_AGENT
from ..models import ReleaseRecord

HEADERS = {"User-Agent": DEFAULT_USER_AGENT}
TIMEOUT = 15

TRACKERS = [
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://open.stealth.si:80/announce",
    "udp://tracker.torrent.eu.org:451/announce",
    "udp://tracker.bittor.pw:1337/announce",
    "udp://public.popcorn-tracker.org:6969/announce",
    "udp://tracker.dler.org:6969/announce",
    "udp://exodus.desync.com:6969/announce",
    "udp://open.demonii.com:1337/announce",
]

FetchText = Callable[[str], str]


class TransportError(Exception):
    """The feed could not be fetched."""


def add_trackers(magnet: str) -> str:
    """Add public trackers to a magnet link if missing."""
    if not magnet or "&tr=" in magnet:
        return magnet
    tracker_params = "".join(f"&tr={quote(t, safe='')}" for t in TRACKERS)
    return magnet + tracker_params


class Source(ABC):
    """Abstract base class for torrent feed sources.

    ``fetch`` replaces the built-in ``requests`` fetcher; it takes a URL and
    returns the response body, raising on failure.
    """

    name: str = "Unknown"

    def __init__(
        self,
        fetch: FetchText | None = None,
        headers: dict[str, str] | None = None,
        timeout: int = TIMEOUT,
    ):
        self._fetch = fetch
        self.headers = headers or dict(HEADERS)
        self.timeout = timeout

    @abstractmethod
    def search(self, query: str) -> list[ReleaseRecord]:
        """Search for releases matching the query. Raises TransportError."""
        ...

    def fetch_text(self, url: str) -> str:
        """Fetch ``url`` and return its body."""
        if self._fetch is not None:
            try:
                return self._fetch(url)
            except TransportError:
                raise
            except Exception as e:
                raise TransportError(f"{self.name} fetch failed: {e}") from e

        try:
            resp = self._get(url)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"{self.name} request failed: {e}") from e
        return resp.text

    def _get(self, url: str, **kwargs) -> requests.Response:
        """Make a GET request with standard headers."""
        return requests.get(url, headers=self.headers, timeout=self.timeout, **kwargs)
