"""Nyaa RSS search adapter."""

from .models import ReleaseRecord, ReleaseType, SearchRequest
from .search import SearchOrchestrator, create_orchestrator

__version__ = "1.0.0"

__all__ = [
    "ReleaseRecord",
    "ReleaseType",
    "SearchRequest",
    "SearchOrchestrator",
    "create_orchestrator",
]
