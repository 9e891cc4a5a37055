"""JSON-RPC 2.0 envelope models for the plain HTTP MCP adapter."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class JsonRpcErrorCode(IntEnum):
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object. A request without ``id`` is a notification."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Literal["2.0"]
    id: Optional[Union[str, int]] = None
    method: str = Field(..., min_length=1)
    # By-position params are a valid envelope; methods decide whether they accept them
    params: Optional[Union[Dict[str, Any], List[Any]]] = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class JsonRpcResponse(BaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: Optional[Union[str, int]] = None
    result: Optional[Any] = None
    error: Optional[JsonRpcError] = None

    def to_wire(self) -> Dict[str, Any]:
        """Exactly one of ``result`` or ``error`` is emitted."""
        data: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


class ToolCallParams(BaseModel):
    """Parameters of ``tools/call``."""

    name: str = Field(..., min_length=1)
    arguments: Optional[Dict[str, Any]] = None


def success_response(request_id: Optional[Union[str, int]], result: Any) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, result=result)


def error_response(
    request_id: Optional[Union[str, int]],
    code: JsonRpcErrorCode,
    message: str,
    data: Optional[Any] = None,
) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=JsonRpcError(code=int(code), message=message, data=data))
