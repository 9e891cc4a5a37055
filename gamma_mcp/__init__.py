"""Gamma MCP server: Gamma content generation exposed as MCP tools."""

__version__ = "2.0.0"
