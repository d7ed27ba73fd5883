"""
Config Module
Configuration management.
"""

from .settings import (
    Config,
    ConfigManager,
    get_bundled_rules_dir,
    get_skip_directories,
    get_templates_dir,
)

__all__ = [
    "Config",
    "ConfigManager",
    "get_bundled_rules_dir",
    "get_skip_directories",
    "get_templates_dir",
]
