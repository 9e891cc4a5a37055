"""Map domain exceptions to MCP error payloads with recovery guidance."""

from __future__ import annotations

from typing import Any, Dict, Optional

from gamma_mcp.exceptions import (
    ConfigurationError,
    GammaMCPError,
    RemoteAPIError,
    UnknownOperationError,
    ValidationError,
)


def _remote_recovery(status_code: Optional[int]) -> str:
    if status_code is None:
        return (
            "The Gamma API could not be reached or returned an unreadable response. "
            "Check network connectivity and GAMMA_API_BASE_URL, then retry."
        )
    if status_code in (401, 403):
        return (
            "AUTHENTICATION FAILED: The Gamma API rejected the API key. "
            "Check that GAMMA_API_KEY is set to a valid key with API access."
        )
    if status_code == 404:
        return (
            "NOT FOUND: Verify the identifier (generationId, gammaId, themeId or folderId). "
            "Use gamma_list_themes / gamma_list_folders to discover valid ids."
        )
    if status_code in (400, 422):
        return "The Gamma API rejected the request. Review the error body, correct the arguments and retry."
    if status_code == 429:
        return "RATE LIMITED: Too many requests or credits exhausted. Wait before retrying."
    if status_code >= 500:
        return "The Gamma API failed internally. Retry later."
    return "Review the error body returned by the Gamma API, adjust the request and retry."


def recovery_for(exc: GammaMCPError) -> str:
    if isinstance(exc, UnknownOperationError):
        available = ", ".join(exc.available) if exc.available else "none"
        return (
            f"Available tools: {available}. "
            "Call list_tools to see detailed descriptions and schemas. "
            "Check for typos in the tool name."
        )
    if isinstance(exc, ValidationError):
        return (
            "Check the tool's inputSchema for required parameters, allowed values and bounds, "
            "correct your input and retry."
        )
    if isinstance(exc, RemoteAPIError):
        return _remote_recovery(exc.status_code)
    if isinstance(exc, ConfigurationError):
        return "The server is misconfigured. Contact the administrator."
    return "Review the error message, adjust the request, and try again."


def map_error_for_mcp(exc: GammaMCPError) -> Dict[str, Any]:
    """Return ``{error_code, message, recovery_strategy, details}`` for an exception."""
    return {
        "error_code": exc.code,
        "message": exc.message,
        "recovery_strategy": recovery_for(exc),
        "details": exc.details or None,
    }
