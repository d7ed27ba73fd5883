"""
Template Registry

Lazily discovers rule templates under a root directory and caches their
metadata by key. The cache lives on the registry instance; the module-level
functions operate on a default instance built from configuration.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

from rulekit.config import ConfigManager, get_bundled_rules_dir
from rulekit.constants import TEMPLATE_CONSTANTS
from rulekit.templates.errors import TemplateLoadError, TemplateNotFoundError
from rulekit.templates.parser import (
    LoadedTemplate,
    TemplateMetadata,
    parse_template_metadata,
    template_base_name,
)
from rulekit.templates.scanner import scan_template_directory

logger = logging.getLogger(__name__)


def load_template(template_path: Path | str) -> str:
    """Load template content from the file system."""
    try:
        return Path(template_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateLoadError(template_path, e) from e


class TemplateRegistry:
    """
    Key -> metadata mapping for the templates under one root.

    Nothing is read until the first query. The mapping is then reused until
    clear_cache() or refresh(); file bodies are always read fresh by get().
    """

    def __init__(
        self,
        templates_root: Path | str,
        skip_directories: Iterable[str] = TEMPLATE_CONSTANTS["SKIP_DIRECTORIES"],
        extension: str = TEMPLATE_CONSTANTS["TEMPLATE_EXTENSION"],
    ):
        self._templates_root = Path(templates_root)
        self.skip_directories = tuple(skip_directories)
        self.extension = extension
        self._cache: Optional[dict[str, TemplateMetadata]] = None

    @property
    def templates_root(self) -> Path:
        return self._templates_root

    # =========================================================================
    # Cache
    # =========================================================================

    def _registry(self) -> dict[str, TemplateMetadata]:
        if self._cache is not None:
            return self._cache

        registry: dict[str, TemplateMetadata] = {}
        for path, content in scan_template_directory(
            self._templates_root, self.skip_directories, self.extension
        ):
            metadata = TemplateMetadata(path=path, **parse_template_metadata(path, content))
            if metadata.key in registry:
                logger.debug(
                    f"Template key '{metadata.key}' from {path} replaces {registry[metadata.key].path}"
                )
            # Last one scanned wins
            registry[metadata.key] = metadata

        logger.debug(f"Discovered {len(registry)} templates under {self._templates_root}")
        self._cache = registry
        return registry

    def clear_cache(self) -> None:
        """Clear template cache to force re-discovery."""
        self._cache = None

    def refresh(self) -> list[TemplateMetadata]:
        """Re-scan the template root and return the fresh listing."""
        self.clear_cache()
        return self.list()

    # =========================================================================
    # Queries
    # =========================================================================

    def list(self) -> list[TemplateMetadata]:
        """List all available templates."""
        return list(self._registry().values())

    def keys(self) -> list[str]:
        """Get all available template keys."""
        return list(self._registry().keys())

    def has(self, key: str) -> bool:
        return key in self._registry()

    def get(self, key: str) -> LoadedTemplate:
        """
        Get a template by key, with its current file content.

        Raises:
            TemplateNotFoundError: key is not in the registry
            TemplateLoadError: the file could not be read
        """
        registry = self._registry()
        template = registry.get(key)
        if template is None:
            raise TemplateNotFoundError(key, list(registry.keys()))

        return LoadedTemplate(
            key=template.key,
            name=template.name,
            description=template.description,
            path=template.path,
            globs=template.globs,
            always_apply=template.always_apply,
            content=load_template(template.path),
        )

    def find_by_file_name(self, file_name: str) -> Optional[TemplateMetadata]:
        """Get template by file name (without extension)."""
        for template in self.list():
            if template_base_name(template.path) == file_name:
                return template
        return None

    def find(self, pattern: str | re.Pattern) -> list[TemplateMetadata]:
        """Templates whose name, description or key matches the regex pattern."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return [
            template for template in self.list()
            if regex.search(template.name)
            or regex.search(template.description)
            or regex.search(template.key)
        ]


# =============================================================================
# Default registry
# =============================================================================

_default_registry: Optional[TemplateRegistry] = None


def get_default_registry() -> TemplateRegistry:
    """Registry over the configured template root, created on first use."""
    global _default_registry
    if _default_registry is None:
        config = ConfigManager.get_instance().get()
        _default_registry = TemplateRegistry(
            config.templates_dir,
            skip_directories=config.skip_directories,
            extension=config.template_extension,
        )
    return _default_registry


def set_default_registry(registry: Optional[TemplateRegistry]) -> None:
    """Replace the default registry (None rebuilds it from config on next use)."""
    global _default_registry
    _default_registry = registry


def get_templates_directory() -> Path:
    """Get template directory path for adding custom templates."""
    return get_default_registry().templates_root


# Fixed building blocks referenced directly by renderers
TEMPLATE_PATHS = {
    "CURSOR_LAYOUT": get_bundled_rules_dir() / "layout" / "cursor.mdc.liquid",
    "HEADER_PARTIAL": get_bundled_rules_dir() / "partials" / "header.mdc.liquid",
}


def list_templates() -> list[TemplateMetadata]:
    return get_default_registry().list()


def get_template_keys() -> list[str]:
    return get_default_registry().keys()


def get_template(key: str) -> LoadedTemplate:
    return get_default_registry().get(key)


def has_template(key: str) -> bool:
    return get_default_registry().has(key)


def get_template_by_file_name(file_name: str) -> Optional[TemplateMetadata]:
    return get_default_registry().find_by_file_name(file_name)


def find_templates(pattern: str | re.Pattern) -> list[TemplateMetadata]:
    return get_default_registry().find(pattern)


def clear_template_cache() -> None:
    get_default_registry().clear_cache()


def refresh_templates() -> list[TemplateMetadata]:
    """Refresh template discovery (useful in development)."""
    return get_default_registry().refresh()


def create_template_vars(
    rule_description: str,
    globs: str = TEMPLATE_CONSTANTS["DEFAULT_GLOBS"],
    always_apply: bool = False,
) -> dict[str, Any]:
    """Create template variables for Liquid rendering."""
    return {
        "rule_description": rule_description,
        "globs": globs,
        "alwaysApply": always_apply,
    }
