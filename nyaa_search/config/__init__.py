"""Configuration management for nyaa-search."""

from .manager import ConfigManager
from .schema import AppConfig, ClassifierConfig, FeedConfig

__all__ = [
    "ConfigManager",
    "AppConfig",
    "FeedConfig",
    "ClassifierConfig",
]
