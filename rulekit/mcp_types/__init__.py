"""
MCP Types Module
Types and dataclasses for the MCP server implementation.
"""

from .tools import (
    MCPErrorCode,
    TextContent,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolInput,
    ToolResult,
)

__all__ = [
    "MCPErrorCode",
    "TextContent",
    "ToolContext",
    "ToolError",
    "ToolHandlerResult",
    "ToolInput",
    "ToolResult",
]
