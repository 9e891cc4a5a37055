"""MCP tool result helpers.

This module holds the low-level helpers used by the dispatcher:
- JSON serialization of remote results
- success/error envelope formatting
- Pydantic validation error formatting

Every tool call produces exactly one text block. Successful calls carry the
remote JSON pretty-printed; failures carry plain text so the remote error
body appears verbatim.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError as PydanticValidationError

from gamma_mcp.mcp_server.tool_types import ToolResponse


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    # Remote response models relay the exact JSON they were built from
    if hasattr(obj, "to_wire"):
        return obj.to_wire()
    # Other Pydantic models
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    # Handle dataclasses and regular objects
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    # Fallback
    return str(obj)


def _json_text(payload: Any) -> TextContent:
    return TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=False, default=_json_serializer),
    )


def _success(data: Any) -> ToolResponse:
    return CallToolResult(content=[_json_text(data)], isError=False)


def _error_text(
    code: str, message: str, recovery: str, details: Optional[Dict[str, Any]] = None
) -> str:
    lines = [f"Error [{code}]: {message}", f"Recovery: {recovery}"]
    if details:
        lines.append("Details: " + json.dumps(details, indent=2, ensure_ascii=False, default=str))
    return "\n".join(lines)


def _error(
    code: str, message: str, recovery: str, details: Optional[Dict[str, Any]] = None
) -> ToolResponse:
    return CallToolResult(
        content=[TextContent(type="text", text=_error_text(code, message, recovery, details))],
        isError=True,
    )


def _error_location(error: Dict[str, Any]) -> str:
    return ".".join(str(part) for part in error["loc"]) or "<arguments>"


def _handle_validation_error(tool: str, exc: PydanticValidationError) -> ToolResponse:
    errors = exc.errors()
    validation_errors: List[Dict[str, Any]] = [
        {"field": _error_location(e), "message": e["msg"], "type": e["type"]} for e in errors
    ]

    # Build helpful recovery message based on error types
    missing_fields = [item["field"] for item in validation_errors if item["type"] == "missing"]
    invalid_fields = [item["field"] for item in validation_errors if item["type"] != "missing"]

    recovery_msg = "Input validation failed. "
    if missing_fields:
        recovery_msg += f"MISSING REQUIRED FIELDS: {', '.join(missing_fields)}. "
    if invalid_fields:
        recovery_msg += f"INVALID VALUES: {', '.join(invalid_fields)}. "
    recovery_msg += (
        "Check the tool's inputSchema for required parameters, allowed values and bounds, "
        "correct your input and retry."
    )

    summary = "; ".join(f"{item['field']}: {item['message']}" for item in validation_errors)
    return _error(
        code="INVALID_ARGUMENTS",
        message=f"Invalid arguments for '{tool}': {summary}",
        recovery=recovery_msg,
        details={"validation_errors": validation_errors},
    )
