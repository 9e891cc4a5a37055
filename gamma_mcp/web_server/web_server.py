"""Gamma Web Server - plain JSON-RPC over HTTP.

For MCP clients that speak JSON-RPC 2.0 over simple POST requests rather
than the Streamable HTTP transport. Tool listing and tool calls go through
the same catalog and ToolDispatcher as the MCP server, so both surfaces
advertise and behave identically.

Endpoints:
    POST /mcp    - JSON-RPC: initialize, ping, tools/list, tools/call
    GET  /health - Service status
"""

import json
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from mcp.types import LATEST_PROTOCOL_VERSION
from pydantic import ValidationError as PydanticValidationError

from gamma_mcp.config_docs import SERVICE_NAME, SERVICE_VERSION
from gamma_mcp.logger import Logger, session_logger
from gamma_mcp.mcp_server.routing import ToolDispatcher
from gamma_mcp.mcp_server.tool_schemas import build_tools, tool_names
from gamma_mcp.web_server.jsonrpc import (
    JsonRpcErrorCode,
    JsonRpcRequest,
    JsonRpcResponse,
    ToolCallParams,
    error_response,
    success_response,
)

MethodHandler = Callable[[Dict[str, Any]], Awaitable[Any]]


class InvalidParamsError(ValueError):
    """Raised by a method handler when its params do not fit."""


class GammaWebServer:
    """FastAPI server exposing the Gamma tools as JSON-RPC methods."""

    def __init__(self, dispatcher: ToolDispatcher, logger: Optional[Logger] = None):
        """
        Initialize the Gamma web server.

        Args:
            dispatcher: Shared tool dispatcher
            logger: Logger (defaults to the shared session logger)
        """
        self.app = FastAPI(title=SERVICE_NAME, description="Gamma tools over JSON-RPC 2.0")
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
        self.dispatcher = dispatcher
        self.logger: Logger = logger or session_logger
        self._methods: Dict[str, MethodHandler] = {
            "initialize": self._handle_initialize,
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }
        self.logger.info("Gamma web server initialized", methods=sorted(self._methods))
        self._setup_routes()

    def _setup_routes(self):
        """Set up all API routes."""

        @self.app.get("/health")
        async def health():
            """Health check endpoint."""
            return JSONResponse(
                content={
                    "status": "healthy",
                    "server": SERVICE_NAME,
                    "version": SERVICE_VERSION,
                    "tools": tool_names(),
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                }
            )

        @self.app.post("/mcp")
        async def mcp_endpoint(request: Request):
            """Handle one JSON-RPC 2.0 request."""
            raw = await request.body()
            try:
                body = json.loads(raw)
            except ValueError as e:
                self.logger.warning("Unparseable JSON-RPC body", error=str(e))
                return self._reply(
                    error_response(None, JsonRpcErrorCode.PARSE_ERROR, "Parse error"), status_code=400
                )

            try:
                rpc = JsonRpcRequest.model_validate(body)
            except PydanticValidationError as e:
                request_id = body.get("id") if isinstance(body, dict) else None
                if not isinstance(request_id, (str, int)) or isinstance(request_id, bool):
                    request_id = None
                self.logger.warning("Invalid JSON-RPC request", error_count=len(e.errors()))
                return self._reply(
                    error_response(request_id, JsonRpcErrorCode.INVALID_REQUEST, "Invalid Request"),
                    status_code=400,
                )

            response = await self.handle_request(rpc)
            if rpc.is_notification:
                return Response(status_code=202)
            return self._reply(response)

    @staticmethod
    def _reply(response: JsonRpcResponse, status_code: int = 200) -> JSONResponse:
        return JSONResponse(content=response.to_wire(), status_code=status_code)

    async def handle_request(self, rpc: JsonRpcRequest) -> JsonRpcResponse:
        """Route a validated JSON-RPC request to its method handler."""
        self.logger.debug("JSON-RPC request", method=rpc.method, id=rpc.id)

        handler = self._methods.get(rpc.method)
        if handler is None:
            self.logger.warning("JSON-RPC method not found", method=rpc.method)
            return error_response(rpc.id, JsonRpcErrorCode.METHOD_NOT_FOUND, f"Method not found: {rpc.method}")

        try:
            result = await handler(self._named_params(rpc))
            return success_response(rpc.id, result)
        except InvalidParamsError as e:
            self.logger.error("JSON-RPC invalid params", method=rpc.method, error=str(e))
            return error_response(rpc.id, JsonRpcErrorCode.INVALID_PARAMS, str(e))
        except Exception as e:
            self.logger.error(
                "JSON-RPC internal error", method=rpc.method, error=str(e), error_type=type(e).__name__
            )
            return error_response(rpc.id, JsonRpcErrorCode.INTERNAL_ERROR, f"Internal error: {e}")

    @staticmethod
    def _named_params(rpc: JsonRpcRequest) -> Dict[str, Any]:
        if isinstance(rpc.params, list):
            if rpc.params:
                raise InvalidParamsError(f"Method '{rpc.method}' takes named params, not a positional array")
            return {}
        return rpc.params or {}

    async def _handle_initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        client_info = params.get("clientInfo") or {}
        self.logger.info(
            "MCP client connected",
            client=client_info.get("name") if isinstance(client_info, dict) else None,
            protocol_version=params.get("protocolVersion"),
        )
        return {
            "protocolVersion": params.get("protocolVersion") or LATEST_PROTOCOL_VERSION,
            "serverInfo": {"name": SERVICE_NAME, "version": SERVICE_VERSION},
            "capabilities": {"tools": {"listChanged": False}},
        }

    async def _handle_ping(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    async def _handle_tools_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        tools = await build_tools()
        return {"tools": [tool.model_dump(mode="json", by_alias=True, exclude_none=True) for tool in tools]}

    async def _handle_tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            call = ToolCallParams.model_validate(params)
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise InvalidParamsError(f"Invalid params for tools/call: {fields}") from e
        result = await self.dispatcher.dispatch(call.name, call.arguments or {})
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)
