"""
Template errors.

Scan-time problems are logged and skipped by the scanner; the errors here
are the ones that reach callers.
"""

from pathlib import Path
from typing import Any


class TemplateError(Exception):
    """Base error for template lookups and loads."""

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(message)


class TemplateNotFoundError(TemplateError):
    """Raised when a key is not present in the registry."""

    def __init__(self, key: str, available_keys: list[str]) -> None:
        self.key = key
        self.available_keys = list(available_keys)
        super().__init__(
            "TEMPLATE_NOT_FOUND",
            f"Template not found: {key}. Available templates: {', '.join(self.available_keys)}",
            key=key,
            available_keys=self.available_keys,
        )


class TemplateLoadError(TemplateError):
    """Raised when a template file cannot be read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = Path(path)
        super().__init__(
            "TEMPLATE_LOAD_FAILED",
            f"Failed to load template: {self.path}. {cause}",
            path=str(self.path),
        )
