"""Configuration manager for nyaa-search."""

import logging
from pathlib import Path

import yaml

from .schema import AppConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "nyaa-search"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
CONFIG_VERSION = 1


class ConfigManager:
    """Reads and writes the YAML configuration file."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> AppConfig:
        """Load the configuration, falling back to defaults."""
        if not self.config_path.exists():
            return AppConfig()

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read %s, using defaults: %s", self.config_path, e)
            return AppConfig()

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a mapping", self.config_path)
            return AppConfig()

        try:
            return AppConfig.from_dict(data)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("Invalid config in %s, using defaults: %s", self.config_path, e)
            return AppConfig()

    def save(self, config: AppConfig) -> None:
        """Write the whole configuration."""
        self._ensure_dir()

        data = {"version": CONFIG_VERSION}
        data.update(config.to_dict())

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
