"""Validation models for the Gamma MCP server."""
