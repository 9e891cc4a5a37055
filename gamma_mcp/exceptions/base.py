"""Base exception classes for the Gamma MCP server.

Every exception carries a machine-readable ``code``, a human-readable
``message`` and an optional ``details`` mapping so the dispatcher can turn
it into a tool error envelope without knowing the concrete type.
"""

from typing import Any, Dict, Optional


class GammaMCPError(Exception):
    """Root of the project exception hierarchy."""

    default_code = "GAMMA_MCP_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(GammaMCPError):
    """Raised when process configuration is missing or invalid.

    This is the only error allowed to stop the process, and only at startup.
    """

    default_code = "CONFIGURATION_ERROR"


class ValidationError(GammaMCPError):
    """Raised when a tool argument fails its schema."""

    default_code = "INVALID_ARGUMENTS"

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        merged = dict(details or {})
        if field is not None:
            merged.setdefault("field", field)
        super().__init__(message, details=merged)
        self.field = field
