from __future__ import annotations

from typing import Any, Awaitable, Callable

from mcp.types import CallToolResult

from gamma_mcp.validation.models import ToolArguments

ToolResponse = CallToolResult
# (client, validated arguments) -> remote result
ToolHandler = Callable[[Any, ToolArguments], Awaitable[Any]]
