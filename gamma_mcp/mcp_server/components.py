"""Component initialization for the MCP server.

Builds the API client and the dispatcher from a loaded Config. Every
transport (stdio, Streamable HTTP and the JSON-RPC web server) starts
from the same ServerComponents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from gamma_mcp.client import GammaClient
from gamma_mcp.config import Config
from gamma_mcp.logger import Logger
from gamma_mcp.mcp_server.routing import ToolDispatcher


@dataclass
class ServerComponents:
    config: Config
    client: GammaClient
    dispatcher: ToolDispatcher


def initialize_components(
    *,
    config: Config,
    logger: Logger,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServerComponents:
    """Initialize all server components.

    Args:
            config: Loaded configuration
            logger: Logger
            transport: Optional httpx transport for the API client (tests)
    """
    client = GammaClient.from_config(config, logger=logger, transport=transport)
    dispatcher = ToolDispatcher(client, logger=logger)
    logger.info("Server components initialized", **config.summary())
    return ServerComponents(config=config, client=client, dispatcher=dispatcher)
