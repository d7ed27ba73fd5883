"""
rulekit
Discovery and metadata extraction for .mdc.liquid rule templates.
"""

__version__ = "0.1.0"
__package_name__ = "rulekit"

from rulekit.templates import (
    TEMPLATE_PATHS,
    LoadedTemplate,
    TemplateError,
    TemplateLoadError,
    TemplateMetadata,
    TemplateNotFoundError,
    TemplateRegistry,
    clear_template_cache,
    create_template_vars,
    find_templates,
    get_template,
    get_template_by_file_name,
    get_template_keys,
    get_templates_directory,
    has_template,
    list_templates,
    load_template,
    refresh_templates,
)

__all__ = [
    "__version__",
    "__package_name__",
    "TEMPLATE_PATHS",
    "LoadedTemplate",
    "TemplateError",
    "TemplateLoadError",
    "TemplateMetadata",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "clear_template_cache",
    "create_template_vars",
    "find_templates",
    "get_template",
    "get_template_by_file_name",
    "get_template_keys",
    "get_templates_directory",
    "has_template",
    "list_templates",
    "load_template",
    "refresh_templates",
]
