"""
Tool-related types
Types shared by the template tools and the MCP server.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class MCPErrorCode(Enum):
    """Error codes reported by tool handlers."""
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"


@dataclass
class TextContent:
    """Text content for tool results - follows MCP specification."""
    type: str
    text: str


class ToolInput(dict):
    """Tool arguments as received from the client."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)


@dataclass
class ToolContext:
    """Tool execution context."""
    requestId: str
    toolName: Optional[str] = None


@dataclass
class ToolResult:
    """Tool execution result - follows MCP specification."""
    content: List[TextContent]
    isError: bool = False


@dataclass
class ToolError:
    """Tool error information."""
    code: MCPErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None


@dataclass
class ToolHandlerResult:
    """Tool handler result."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None
