"""Search query construction for each search mode."""

from enum import Enum

from .models import SearchRequest
from .text import format_episode

MOVIE_TOKEN = "movie"


class SearchMode(str, Enum):
    SINGLE = "single"
    BATCH = "batch"
    MOVIE = "movie"


def _join(*terms: str | None, resolution: int | None = None) -> str:
    tokens = [t for t in terms if t]
    if resolution:
        tokens.append(f"{resolution}p")
    return " ".join(tokens)


def build_single_query(request: SearchRequest) -> str | None:
    """Title, zero-padded episode and resolution. None without an episode."""
    title = request.primary_title
    if not title or not request.episode:
        return None
    return _join(title, format_episode(request.episode), resolution=request.resolution)


def build_batch_query(request: SearchRequest) -> str | None:
    title = request.primary_title
    if not title:
        return None
    return _join(title, resolution=request.resolution)


def build_movie_query(request: SearchRequest) -> str | None:
    title = request.primary_title
    if not title:
        return None
    return _join(title, MOVIE_TOKEN, resolution=request.resolution)


_BUILDERS = {
    SearchMode.SINGLE: build_single_query,
    SearchMode.BATCH: build_batch_query,
    SearchMode.MOVIE: build_movie_query,
}


def build_query(mode: SearchMode | str, request: SearchRequest) -> str | None:
    """Build the query for ``mode``."""
    try:
        builder = _BUILDERS[SearchMode(mode)]
    except ValueError:
        raise ValueError(f"Unknown search mode: {mode!r}") from None
    return builder(request)
