"""Unknown operation exception."""

from typing import Iterable, Optional

from gamma_mcp.exceptions.base import GammaMCPError


class UnknownOperationError(GammaMCPError):
    """Raised when a tool name is not in the catalog."""

    default_code = "UNKNOWN_TOOL"

    def __init__(self, name: str, available: Optional[Iterable[str]] = None):
        available_list = sorted(available or [])
        super().__init__(
            f"Tool '{name}' does not exist in this service.",
            details={"tool": name, "available_tools": available_list},
        )
        self.name = name
        self.available = available_list
