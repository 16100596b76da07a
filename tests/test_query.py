from __future__ import annotations

import pytest

from nyaa_search.models import SearchRequest
from nyaa_search.query import (
    SearchMode,
    build_batch_query,
    build_movie_query,
    build_query,
    build_single_query,
)


def test_single_query_pads_episode_and_adds_resolution() -> None:
    request = SearchRequest(titles=["Frieren", "Sousou no Frieren"], episode=5, resolution=1080)

    assert build_single_query(request) == "Frieren 05 1080p"


def test_single_query_keeps_two_digit_episode() -> None:
    assert build_single_query(SearchRequest(titles=["Show"], episode=12)) == "Show 12"
    assert build_single_query(SearchRequest(titles=["Show"], episode=104)) == "Show 104"


def test_single_query_without_episode_is_none() -> None:
    assert build_single_query(SearchRequest(titles=["Show"], resolution=720)) is None


def test_batch_query_has_no_episode_token() -> None:
    request = SearchRequest(titles=["Show"], episode=3, resolution=720)

    assert build_batch_query(request) == "Show 720p"
    assert build_batch_query(SearchRequest(titles=["Show"])) == "Show"


def test_movie_query_adds_movie_token() -> None:
    request = SearchRequest(titles=["Suzume"], resolution=1080)

    assert build_movie_query(request) == "Suzume movie 1080p"
    assert build_movie_query(SearchRequest(titles=["Suzume"])) == "Suzume movie"


def test_no_title_builds_no_query() -> None:
    request = SearchRequest(titles=[], episode=1)

    assert build_single_query(request) is None
    assert build_batch_query(request) is None
    assert build_movie_query(request) is None


def test_build_query_dispatches_by_mode() -> None:
    request = SearchRequest(titles=["Show"], episode=2)

    assert build_query(SearchMode.SINGLE, request) == "Show 02"
    assert build_query("batch", request) == "Show"
    assert build_query("movie", request) == "Show movie"


def test_build_query_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError, match="Unknown search mode"):
        build_query("ova", SearchRequest(titles=["Show"]))
