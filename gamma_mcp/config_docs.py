"""Centralized configuration documentation and defaults for the Gamma MCP service.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Remote API
# ----------
# GAMMA_API_KEY: API key sent as X-API-KEY on every request (required)
# GAMMA_API_BASE_URL: Base URL of the Gamma public API
#   (default: https://public-api.gamma.app/v1.0)
# GAMMA_TIMEOUT_SECONDS: Per-request timeout in seconds (default: 60)
#
# HTTP Transports
# ---------------
# GAMMA_MCP_HOST: Bind address for the Streamable HTTP and JSON-RPC servers
#   (default: 0.0.0.0)
# GAMMA_MCP_PORT: Bind port (default: 3000)
#
# Logging
# -------
# GAMMA_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
#
# A .env file in the working directory is loaded by the entrypoints.

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

SERVICE_NAME = "gamma-mcp-server"
SERVICE_VERSION = "2.0.0"

DEFAULT_BASE_URL = "https://public-api.gamma.app/v1.0"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
