"""
Templates Module

Discovery, parsing and lookup of .mdc.liquid rule templates.
"""

from .errors import TemplateError, TemplateLoadError, TemplateNotFoundError
from .parser import (
    LoadedTemplate,
    TemplateMetadata,
    derive_template_key,
    derive_template_name,
    parse_template_metadata,
    template_base_name,
)
from .registry import (
    TEMPLATE_PATHS,
    TemplateRegistry,
    clear_template_cache,
    create_template_vars,
    find_templates,
    get_default_registry,
    get_template,
    get_template_by_file_name,
    get_template_keys,
    get_templates_directory,
    has_template,
    list_templates,
    load_template,
    refresh_templates,
    set_default_registry,
)
from .scanner import scan_template_directory

__all__ = [
    # errors
    "TemplateError",
    "TemplateLoadError",
    "TemplateNotFoundError",
    # parser
    "TemplateMetadata",
    "LoadedTemplate",
    "parse_template_metadata",
    "derive_template_key",
    "derive_template_name",
    "template_base_name",
    # scanner
    "scan_template_directory",
    # registry
    "TemplateRegistry",
    "TEMPLATE_PATHS",
    "get_default_registry",
    "set_default_registry",
    "list_templates",
    "get_template_keys",
    "get_template",
    "has_template",
    "get_template_by_file_name",
    "find_templates",
    "clear_template_cache",
    "refresh_templates",
    "get_templates_directory",
    "load_template",
    "create_template_vars",
]
