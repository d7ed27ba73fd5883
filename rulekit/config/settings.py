"""
Settings
Configuration management for rulekit.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rulekit.constants import TEMPLATE_CONSTANTS


def get_bundled_rules_dir() -> Path:
    """Directory of rule templates shipped inside the package."""
    return Path(__file__).resolve().parent.parent / "rules"


def get_templates_dir() -> Path:
    """
    Get the template root directory.

    Uses RULEKIT_TEMPLATES_DIR env var if set, otherwise the bundled rules/.
    """
    env_dir = os.environ.get("RULEKIT_TEMPLATES_DIR")
    if env_dir:
        return Path(os.path.expanduser(env_dir)).resolve()
    return get_bundled_rules_dir()


def get_skip_directories() -> tuple[str, ...]:
    """Get directory names excluded from scanning (RULEKIT_SKIP_DIRS, comma-separated)."""
    env_value = os.environ.get("RULEKIT_SKIP_DIRS")
    if env_value is None:
        return tuple(TEMPLATE_CONSTANTS["SKIP_DIRECTORIES"])
    return tuple(name.strip() for name in env_value.split(",") if name.strip())


@dataclass
class Config:
    """Runtime configuration."""
    templates_dir: Path = field(default_factory=get_bundled_rules_dir)
    skip_directories: tuple[str, ...] = tuple(TEMPLATE_CONSTANTS["SKIP_DIRECTORIES"])
    template_extension: str = TEMPLATE_CONSTANTS["TEMPLATE_EXTENSION"]
    log_level: str = "INFO"


class ConfigManager:
    """Configuration manager - loads and provides config."""

    _instance: Optional["ConfigManager"] = None

    def __init__(self):
        self._config: Optional[Config] = None

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self) -> Config:
        """Load configuration from environment."""
        self._config = Config(
            templates_dir=get_templates_dir(),
            skip_directories=get_skip_directories(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
        return self._config

    def get(self) -> Config:
        """Get current configuration, loading it on first use."""
        if self._config is None:
            return self.load()
        return self._config
