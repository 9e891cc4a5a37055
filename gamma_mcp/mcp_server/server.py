"""Server lifecycle: stdio and StreamableHTTP wiring for the MCP server."""

from __future__ import annotations

import contextlib
from datetime import datetime, timezone
from typing import AsyncIterator

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from gamma_mcp.config_docs import SERVICE_NAME, SERVICE_VERSION
from gamma_mcp.logger import Logger, session_logger
from gamma_mcp.mcp_server.tool_schemas import tool_names


async def run_stdio(server: Server, logger: Logger = session_logger) -> None:
    """Serve MCP over stdin/stdout. Logs go to stderr only."""
    logger.info("Starting MCP server", transport="stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("MCP server shutdown complete", transport="stdio")


class _StreamableHTTPEndpoint:
    """ASGI endpoint forwarding /mcp requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope, receive, send) -> None:
        await self.session_manager.handle_request(scope, receive, send)


def create_streamable_http_app(server: Server, logger: Logger = session_logger) -> Starlette:
    """Build the Starlette app serving MCP at /mcp plus GET /health."""
    # Stateless: every request is independent, nothing is kept between calls
    session_manager_http = StreamableHTTPSessionManager(
        app=server,
        event_store=None,
        json_response=False,
        stateless=True,
    )

    async def health(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "healthy",
                "server": SERVICE_NAME,
                "version": SERVICE_VERSION,
                "transport": "streamable-http",
                "tools": tool_names(),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    @contextlib.asynccontextmanager
    async def lifespan(starlette_app) -> AsyncIterator[None]:
        logger.info("Starting StreamableHTTP session manager")
        async with session_manager_http.run():
            logger.info("StreamableHTTP session manager ready")
            yield

    return Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Route("/mcp", endpoint=_StreamableHTTPEndpoint(session_manager_http)),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET", "POST", "DELETE"],
                allow_headers=["*"],
                expose_headers=["Mcp-Session-Id"],
            )
        ],
        lifespan=lifespan,
    )


async def main(
    server: Server, host: str = "0.0.0.0", port: int = 3000, logger: Logger = session_logger
) -> None:
    import uvicorn

    logger.info("Starting Gamma MCP server", host=host, port=port, transport="streamable-http")
    config = uvicorn.Config(
        create_streamable_http_app(server, logger), host=host, port=port, log_level="info"
    )
    uvicorn_server = uvicorn.Server(config)
    await uvicorn_server.serve()
