"""Gamma API client package."""

from gamma_mcp.client.gamma_client import GammaClient

__all__ = ["GammaClient"]
