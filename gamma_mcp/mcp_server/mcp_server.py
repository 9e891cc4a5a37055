"""Gamma MCP server.

Exposes the Gamma generation API as MCP tools. Tool listing comes from the
shared catalog and every call goes through the ToolDispatcher, which owns
argument validation, so the SDK's own input validation is switched off.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.types import CallToolResult, Tool

from gamma_mcp.config_docs import SERVICE_NAME, SERVICE_VERSION
from gamma_mcp.mcp_server.routing import ToolDispatcher
from gamma_mcp.mcp_server.tool_schemas import build_tools


def build_server(dispatcher: ToolDispatcher) -> Server:
    app = Server(SERVICE_NAME, version=SERVICE_VERSION)

    @app.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return await build_tools()

    @app.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        return await dispatcher.dispatch(name, arguments or {})

    return app
