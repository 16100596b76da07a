"""Torrent feed source implementations."""

from .base import Source, TransportError
from .nyaa import NyaaSource

__all__ = [
    "Source",
    "TransportError",
    "NyaaSource",
]
