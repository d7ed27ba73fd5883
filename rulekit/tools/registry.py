"""
Tool Registry
Manages tool registration, discovery, and execution.
"""

from typing import Any, Dict, List, Optional

from mcp.types import Tool as MCPTool

from rulekit.mcp_types import MCPErrorCode, ToolContext, ToolError, ToolHandlerResult, ToolInput
from rulekit.tools.base import BaseTool


class ToolRegistry:
    """Tool Registry Implementation."""

    def __init__(self, logger):
        self.logger = logger
        self.tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool with the registry."""
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")

        self.tools[tool.name] = tool
        self.logger.debug(f"Tool registered: {tool.name}")

    def get(self, toolName: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self.tools.get(toolName)

    def listTools(self) -> List[BaseTool]:
        """List all registered tools."""
        return list(self.tools.values())

    def hasTool(self, toolName: str) -> bool:
        """Check if a tool is registered."""
        return toolName in self.tools

    async def execute(self, toolName: str, input: Dict[str, Any], context: ToolContext) -> ToolHandlerResult:
        """Execute a tool with input and context."""
        tool = self.get(toolName)
        if not tool:
            return ToolHandlerResult(
                success=False,
                error=ToolError(code=MCPErrorCode.TOOL_NOT_FOUND, message=f"Tool {toolName} not found"),
            )
        return await tool.execute(ToolInput(**(input or {})), context)

    def getToolSchemas(self) -> List[MCPTool]:
        """Get tool schemas for MCP protocol - returns proper MCP Tool objects."""
        return [
            MCPTool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema
            )
            for tool in self.listTools()
        ]
