"""
Template Scanner

Walks a template root and collects every rule template with its text.
Layout and partial directories are skipped; unreadable entries are logged
and left out so one bad file never hides the rest.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from rulekit.constants import TEMPLATE_CONSTANTS

logger = logging.getLogger(__name__)


def scan_template_directory(
    root_dir: Path,
    skip_directories: Iterable[str] = TEMPLATE_CONSTANTS["SKIP_DIRECTORIES"],
    extension: str = TEMPLATE_CONSTANTS["TEMPLATE_EXTENSION"],
) -> list[tuple[Path, str]]:
    """
    Recursively scan a directory for template files.

    Args:
        root_dir: Directory to scan
        skip_directories: Directory names that are never descended into
        extension: Filename suffix marking a template

    Returns:
        (path, content) pairs in directory-listing order
    """
    skip = frozenset(skip_directories)
    templates: list[tuple[Path, str]] = []
    _scan(Path(root_dir), skip, extension, templates)
    return templates


def _scan(dir_path: Path, skip: frozenset, extension: str, templates: list) -> None:
    try:
        entries = list(dir_path.iterdir())
    except OSError as e:
        logger.warning(f"Could not scan directory {dir_path}: {e}")
        return

    for entry in entries:
        try:
            if entry.is_dir():
                if entry.name in skip:
                    continue
                _scan(entry, skip, extension, templates)
            elif entry.is_file() and entry.name.endswith(extension):
                content = entry.read_text(encoding="utf-8")
                templates.append((entry.absolute(), content))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not process {entry}: {e}")
