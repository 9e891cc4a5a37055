"""Remote Gamma API exception."""

from typing import Optional

from gamma_mcp.exceptions.base import GammaMCPError


class RemoteAPIError(GammaMCPError):
    """Raised for non-2xx responses, transport failures and unreadable bodies.

    ``status_code`` is None when no HTTP response was received.
    """

    default_code = "REMOTE_API_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        details = {"status_code": status_code}
        if body is not None:
            details["body"] = body
        super().__init__(message, details=details)
        self.status_code = status_code
        self.body = body
