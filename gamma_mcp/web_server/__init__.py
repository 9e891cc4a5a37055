"""Plain JSON-RPC HTTP adapter for the Gamma tools."""

from gamma_mcp.web_server.web_server import GammaWebServer

__all__ = ["GammaWebServer"]
