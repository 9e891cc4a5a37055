"""MCP server package: tool catalog, dispatcher and transports."""

from gamma_mcp.mcp_server.components import ServerComponents, initialize_components
from gamma_mcp.mcp_server.mcp_server import build_server
from gamma_mcp.mcp_server.routing import ToolDispatcher
from gamma_mcp.mcp_server.tool_schemas import TOOL_CATALOG, build_tools, get_descriptor

__all__ = [
    "ServerComponents",
    "initialize_components",
    "build_server",
    "ToolDispatcher",
    "TOOL_CATALOG",
    "build_tools",
    "get_descriptor",
]
