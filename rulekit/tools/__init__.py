"""
Tools Module

The MCP tools for rulekit:
- list_templates: List discovered rule templates
- get_template: Fetch one template with its content
- find_templates: Regex search over name/description/key
- refresh_templates: Rescan the template directory
"""

from .base import BaseTool
from .registry import ToolRegistry
from .templates import (
    FindTemplatesTool,
    GetTemplateTool,
    ListTemplatesTool,
    RefreshTemplatesTool,
)

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "ListTemplatesTool",
    "GetTemplateTool",
    "FindTemplatesTool",
    "RefreshTemplatesTool",
]
