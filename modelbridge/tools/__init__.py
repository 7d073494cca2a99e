"""Tool execution: typed tools, routing and the MCP bridge."""

from .mcp import McpClient, McpToolDefinition, McpToolExecutor, McpToolProvider
from .router import ToolRouter
from .tool import Tool, render_tool_output

__all__ = [
    "Tool",
    "render_tool_output",
    "ToolRouter",
    "McpClient",
    "McpToolDefinition",
    "McpToolExecutor",
    "McpToolProvider",
]
