"""Exceptions for the Gamma MCP server.

All exceptions include messages written to be read by an LLM caller, so a
failed tool call can be corrected and retried.
"""

from gamma_mcp.exceptions.base import (
    ConfigurationError,
    GammaMCPError,
    ValidationError,
)
from gamma_mcp.exceptions.operation import UnknownOperationError
from gamma_mcp.exceptions.remote import RemoteAPIError

__all__ = [
    "GammaMCPError",
    "ConfigurationError",
    "ValidationError",
    "UnknownOperationError",
    "RemoteAPIError",
]
