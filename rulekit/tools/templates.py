"""
Template Tools

list_templates, get_template, find_templates and refresh_templates as MCP
tools over a TemplateRegistry.
"""

import re
from typing import Any

from rulekit.mcp_types import (
    MCPErrorCode,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolInput,
)
from rulekit.templates import TemplateError
from rulekit.tools.base import BaseTool


class ListTemplatesTool(BaseTool):
    """List every discovered rule template."""

    @property
    def name(self) -> str:
        return "list_templates"

    @property
    def description(self) -> str:
        return "List all available rule templates with key, name, description, globs and alwaysApply."

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        templates = self.registry.list()
        self.logExecution(context, True)
        return self.createSuccessResult({
            "count": len(templates),
            "templates": [t.to_dict() for t in templates],
        })


class GetTemplateTool(BaseTool):
    """Fetch one template, including its current file content."""

    @property
    def name(self) -> str:
        return "get_template"

    @property
    def description(self) -> str:
        return """Get a rule template by key, including its raw .mdc.liquid content.

REQUIRED: key (e.g. "auth", "api_routes")
Use list_templates to see available keys."""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "key": {
                    "type": "string",
                    "description": "Template key, derived from the file name (example-foo-bar -> foo_bar)"
                }
            },
            "required": ["key"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        error = self.validateInput(input)
        if error:
            return self.createErrorResult(error)

        try:
            template = self.registry.get(input["key"])
        except TemplateError as e:
            self.logExecution(context, False)
            return self.handleTemplateError(e)

        self.logExecution(context, True)
        return self.createSuccessResult(template.to_dict())


class FindTemplatesTool(BaseTool):
    """Regex search over template name, description and key."""

    @property
    def name(self) -> str:
        return "find_templates"

    @property
    def description(self) -> str:
        return """Find rule templates whose name, description or key matches a regular expression.

REQUIRED: pattern
OPTIONAL: ignore_case (default true)"""

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "pattern": {
                    "type": "string",
                    "description": "Regular expression, e.g. 'auth' or '^react'"
                },
                "ignore_case": {
                    "type": "boolean",
                    "description": "Match case-insensitively",
                    "default": True
                }
            },
            "required": ["pattern"]
        }

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        error = self.validateInput(input)
        if error:
            return self.createErrorResult(error)

        flags = re.IGNORECASE if input.get("ignore_case", True) else 0
        try:
            regex = re.compile(input["pattern"], flags)
        except re.error as e:
            return self.createErrorResult(ToolError(
                code=MCPErrorCode.INVALID_INPUT,
                message=f"Invalid pattern '{input['pattern']}': {e}",
            ))

        matches = self.registry.find(regex)
        self.logExecution(context, True)
        return self.createSuccessResult({
            "pattern": input["pattern"],
            "count": len(matches),
            "templates": [t.to_dict() for t in matches],
        })


class RefreshTemplatesTool(BaseTool):
    """Drop the cached registry and rescan the template root."""

    @property
    def name(self) -> str:
        return "refresh_templates"

    @property
    def description(self) -> str:
        return "Rescan the template directory after adding, renaming or deleting templates."

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        templates = self.registry.refresh()
        self.logger.info(f"Rescanned {self.registry.templates_root}: {len(templates)} templates")
        self.logExecution(context, True)
        return self.createSuccessResult({
            "count": len(templates),
            "keys": [t.key for t in templates],
        })
