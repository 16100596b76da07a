"""Data models for nyaa-search."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ReleaseType(str, Enum):
    """Kind of release a search mode asked for."""

    SINGLE = "single"
    BATCH = "batch"
    MOVIE = "movie"
    UNSET = "unset"


@dataclass(frozen=True)
class SearchRequest:
    """A typed search intent built by the caller."""

    titles: Sequence[str] = ()
    episode: int | None = None
    resolution: int | None = None
    exclusions: Sequence[str] = ()

    @property
    def primary_title(self) -> str | None:
        """Only the first candidate title is searched for."""
        return self.titles[0] if self.titles else None


@dataclass(frozen=True)
class ReleaseRecord:
    """A single release parsed from the feed."""

    title: str
    link: str
    hash: str
    date: datetime
    seeders: int = 0
    leechers: int = 0
    downloads: int = 0
    size: int = 0  # bytes
    verified: bool = False
    category: str = ""
    release_type: ReleaseType = ReleaseType.UNSET

    @property
    def size_formatted(self) -> str:
        """Format bytes to human-readable size."""
        size_bytes = float(self.size)
        for unit in ["B", "KB", "MB", "GB", "TB"]:
            if size_bytes < 1024:
                return f"{size_bytes:.1f} {unit}"
            size_bytes /= 1024
        return f"{size_bytes:.1f} PB"

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "title": self.title,
            "link": self.link,
            "hash": self.hash,
            "date": self.date.isoformat(),
            "seeders": self.seeders,
            "leechers": self.leechers,
            "downloads": self.downloads,
            "size": self.size,
            "verified": self.verified,
            "category": self.category,
            "type": self.release_type.value,
        }
