"""Configuration schema for nyaa-search."""

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://nyaa.si"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"

BATCH_KEYWORDS = (
    "batch",
    "complete",
    "vol",
    "01-",
    "1-",
    "season",
    "s1",
    "s2",
    "s3",
    "s4",
)


@dataclass
class FeedConfig:
    """Where and how the RSS feed is requested."""

    base_url: str = DEFAULT_BASE_URL
    category: str = "1_2"  # Anime - English-translated
    filter: str = "0"  # No filter
    timeout: int = 15
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class ClassifierConfig:
    """Heuristics used to classify and trust releases."""

    batch_keywords: list[str] = field(default_factory=lambda: list(BATCH_KEYWORDS))
    trusted_category: str = "trusted"
    trusted_marker: str = "✓"
    seeder_threshold: int = 50


@dataclass
class AppConfig:
    """Top-level configuration."""

    feed: FeedConfig = field(default_factory=FeedConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {
            "feed": {
                "base_url": self.feed.base_url,
                "category": self.feed.category,
                "filter": self.feed.filter,
                "timeout": self.feed.timeout,
                "user_agent": self.feed.user_agent,
            },
            "classifier": {
                "batch_keywords": list(self.classifier.batch_keywords),
                "trusted_category": self.classifier.trusted_category,
                "trusted_marker": self.classifier.trusted_marker,
                "seeder_threshold": self.classifier.seeder_threshold,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create from dictionary (YAML deserialization)."""
        feed_data = data.get("feed") or {}
        classifier_data = data.get("classifier") or {}
        defaults = cls()

        return cls(
            feed=FeedConfig(
                base_url=str(feed_data.get("base_url", defaults.feed.base_url)).rstrip("/"),
                category=str(feed_data.get("category", defaults.feed.category)),
                filter=str(feed_data.get("filter", defaults.feed.filter)),
                timeout=int(feed_data.get("timeout", defaults.feed.timeout)),
                user_agent=str(feed_data.get("user_agent", defaults.feed.user_agent)),
            ),
            classifier=ClassifierConfig(
                batch_keywords=[
                    str(k)
                    for k in classifier_data.get(
                        "batch_keywords", defaults.classifier.batch_keywords
                    )
                ],
                trusted_category=str(
                    classifier_data.get(
                        "trusted_category", defaults.classifier.trusted_category
                    )
                ),
                trusted_marker=str(
                    classifier_data.get(
                        "trusted_marker", defaults.classifier.trusted_marker
                    )
                ),
                seeder_threshold=int(
                    classifier_data.get(
                        "seeder_threshold", defaults.classifier.seeder_threshold
                    )
                ),
            ),
        )
