#!/usr/bin/env python3
"""
rulekit MCP Server
Serves the template registry over MCP (stdio transport).
"""

import asyncio
from typing import Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from rulekit import __package_name__, __version__
from rulekit.config import ConfigManager
from rulekit.mcp_types import ToolContext
from rulekit.templates import TemplateRegistry
from rulekit.tools import (
    FindTemplatesTool,
    GetTemplateTool,
    ListTemplatesTool,
    RefreshTemplatesTool,
    ToolRegistry,
)
from rulekit.utils import Logger


class RuleKitMCPServer:
    """MCP server exposing the template registry as tools."""

    def __init__(self, registry: Optional[TemplateRegistry] = None):
        config = ConfigManager.get_instance().get()

        self.server = Server(__package_name__)
        self.logger = Logger(name=__package_name__, level=config.log_level)
        self.registry = registry or TemplateRegistry(
            config.templates_dir,
            skip_directories=config.skip_directories,
            extension=config.template_extension,
        )

        self.tool_registry = ToolRegistry(self.logger)
        self._register_tools()
        self._setup_handlers()

    def _register_tools(self):
        for tool_class in (ListTemplatesTool, GetTemplateTool, FindTemplatesTool, RefreshTemplatesTool):
            self.tool_registry.register(tool_class(self.logger, self.registry))
        self.logger.info(f"Registered {len(self.tool_registry.listTools())} tools")

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return self.tool_registry.getToolSchemas()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)

    async def call_tool(self, name: str, arguments: Optional[dict]) -> list[types.TextContent]:
        """Run a tool; failures are raised so the SDK reports them as isError results."""
        if not self.tool_registry.hasTool(name):
            raise ValueError(f"Tool '{name}' not found")

        context = ToolContext(
            requestId=f"req_{asyncio.get_running_loop().time()}",
            toolName=name,
        )
        result = await self.tool_registry.execute(name, arguments or {}, context)

        if result.success and result.result:
            return [
                types.TextContent(type="text", text=item.text.strip())
                for item in result.result.content
            ]

        error_msg = result.error.message if result.error else "Unknown error"
        raise RuntimeError(error_msg)

    async def start(self):
        """Start the MCP server on stdio."""
        self.logger.info(f"Serving templates from {self.registry.templates_root}")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=__package_name__,
                    server_version=__version__,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    ),
                ),
            )


async def run_stdio():
    """Run in stdio mode (for Cursor/Claude Desktop)."""
    server = RuleKitMCPServer()
    await server.start()


def main():
    asyncio.run(run_stdio())


if __name__ == "__main__":
    main()
