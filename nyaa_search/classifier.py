"""Release classification heuristics."""

from .config.schema import ClassifierConfig


class ReleaseClassifier:
    """Decides whether a release is a batch and whether it can be trusted.

    Both checks are plain substring tests, so they are approximate: a title
    with "s1" inside an unrelated word, or an episode range such as
    "11-15 recap", is still reported as a batch.
    """

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = config or ClassifierConfig()
        self._keywords = [k.lower() for k in self.config.batch_keywords if k]

    def is_batch(self, title: str) -> bool:
        """Check if title indicates a batch release."""
        title_lower = title.lower()
        return any(keyword in title_lower for keyword in self._keywords)

    def is_verified(self, category: str | None, title: str, seeders: int) -> bool:
        """Any single trust signal is enough."""
        config = self.config
        if category and config.trusted_category and config.trusted_category in category:
            return True
        if config.trusted_marker and config.trusted_marker in title:
            return True
        return seeders > config.seeder_threshold


_default = ReleaseClassifier()


def is_batch(title: str) -> bool:
    return _default.is_batch(title)


def is_verified(category: str | None, title: str, seeders: int) -> bool:
    return _default.is_verified(category, title, seeders)
