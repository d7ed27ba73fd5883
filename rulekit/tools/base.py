"""
Base Tool Classes
Abstract base class for the template tools exposed over MCP.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from rulekit.mcp_types import (
    MCPErrorCode,
    TextContent,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolInput,
    ToolResult,
)
from rulekit.templates import TemplateError, TemplateNotFoundError, TemplateRegistry, get_default_registry


class BaseTool(ABC):
    """Abstract base class for all tool implementations."""

    def __init__(self, logger, registry: Optional[TemplateRegistry] = None):
        self.logger = logger
        self._registry = registry

    @property
    def registry(self) -> TemplateRegistry:
        """Registry given at construction, else the process default."""
        return self._registry or get_default_registry()

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""

    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""

    @abstractmethod
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute the tool with input and context."""

    def validateInput(self, input: ToolInput) -> Optional[ToolError]:
        """Check required fields and string/boolean types against the schema."""
        for field in self.inputSchema.get('required', []):
            if input.get(field) is None:
                return ToolError(
                    code=MCPErrorCode.INVALID_INPUT,
                    message=f"Required field '{field}' is missing",
                )

        properties = self.inputSchema.get('properties', {})
        for field, value in input.items():
            expected_type = properties.get(field, {}).get('type')
            if expected_type == 'string' and not isinstance(value, str):
                return ToolError(
                    code=MCPErrorCode.INVALID_INPUT,
                    message=f"Field '{field}' must be a string",
                )
            elif expected_type == 'boolean' and not isinstance(value, bool):
                return ToolError(
                    code=MCPErrorCode.INVALID_INPUT,
                    message=f"Field '{field}' must be a boolean",
                )
        return None

    def createSuccessResult(self, data: Any) -> ToolHandlerResult:
        """Wrap data as JSON text content."""
        text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
        return ToolHandlerResult(
            success=True,
            result=ToolResult(content=[TextContent(type="text", text=text)]),
        )

    def createErrorResult(self, error: ToolError) -> ToolHandlerResult:
        return ToolHandlerResult(
            success=False,
            result=ToolResult(content=[TextContent(type="text", text=error.message)], isError=True),
            error=error,
        )

    def handleTemplateError(self, error: TemplateError) -> ToolHandlerResult:
        """Turn a registry error into a tool error result."""
        self.logger.error(f"{self.name} failed: {error}")
        code = (
            MCPErrorCode.RESOURCE_NOT_FOUND
            if isinstance(error, TemplateNotFoundError)
            else MCPErrorCode.TOOL_EXECUTION_ERROR
        )
        return self.createErrorResult(ToolError(code=code, message=str(error), details=error.context))

    def logExecution(self, context: ToolContext, success: bool):
        self.logger.debug(f"Tool executed: {self.name}", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId,
        })
