from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pytest
import requests

from nyaa_search.config import FeedConfig
from nyaa_search.sources import NyaaSource, TransportError
from nyaa_search.sources.base import add_trackers

from .feeds import FakeFetch, make_feed, make_item


class _FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


def test_feed_url_encodes_query_and_fixed_params() -> None:
    source = NyaaSource()

    url = source.feed_url("[Group] Show & Friends 05 1080p")

    parsed = urlparse(url)
    assert f"{parsed.scheme}://{parsed.netloc}" == "https://nyaa.si"
    assert parsed.query.startswith("page=rss&q=%5BGroup%5D%20Show%20%26%20Friends%2005%201080p&")
    params = parse_qs(parsed.query)
    assert params["page"] == ["rss"]
    assert params["q"] == ["[Group] Show & Friends 05 1080p"]
    assert params["c"] == ["1_2"]
    assert params["f"] == ["0"]


def test_feed_url_uses_config() -> None:
    source = NyaaSource(FeedConfig(base_url="https://mirror.example/", category="1_0", filter="2"))

    assert source.feed_url("x") == "https://mirror.example/?page=rss&q=x&c=1_0&f=2"


def test_search_fetches_and_parses(fake_fetch: FakeFetch) -> None:
    fake_fetch.body = make_feed(make_item("Show - 01", "AA"), make_item("Show - 02", "BB"))
    source = NyaaSource(fetch=fake_fetch)

    results = source.search("Show")

    assert [r.title for r in results] == ["Show - 01", "Show - 02"]
    assert fake_fetch.urls == [source.feed_url("Show")]


def test_injected_fetch_errors_become_transport_errors() -> None:
    source = NyaaSource(fetch=FakeFetch(error=ConnectionError("reset")))

    with pytest.raises(TransportError, match="reset"):
        source.search("Show")


def test_default_fetch_uses_requests(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, dict]] = []

    def _fake_get(url, **kwargs):
        calls.append((url, kwargs))
        return _FakeResponse(make_feed(make_item("Show - 01", "AA")))

    monkeypatch.setattr(requests, "get", _fake_get)
    source = NyaaSource(FeedConfig(timeout=7, user_agent="nyaa-search-test"))

    results = source.search("Show")

    assert len(results) == 1
    url, kwargs = calls[0]
    assert url == source.feed_url("Show")
    assert kwargs["timeout"] == 7
    assert kwargs["headers"] == {"User-Agent": "nyaa-search-test"}


def test_default_fetch_raises_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(requests, "get", lambda url, **kwargs: _FakeResponse(status_code=503))

    with pytest.raises(TransportError, match="503"):
        NyaaSource().search("Show")


def test_default_fetch_raises_on_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(url, **kwargs):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(requests, "get", _boom)

    with pytest.raises(TransportError, match="dns failure"):
        NyaaSource().search("Show")


def test_add_trackers_appends_once() -> None:
    magnet = "magnet:?xt=urn:btih:abc&dn=Show"

    with_trackers = add_trackers(magnet)

    assert with_trackers.startswith(magnet)
    assert "&tr=udp%3A%2F%2Ftracker.opentrackr.org%3A1337%2Fannounce" in with_trackers
    assert add_trackers(with_trackers) == with_trackers
    assert add_trackers("") == ""
