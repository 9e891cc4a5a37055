"""Process configuration loaded once from the environment.

The configuration is immutable after loading. A missing API key is the one
fatal startup condition.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from gamma_mcp.config_docs import (
    DEFAULT_BASE_URL,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    VALID_LOG_LEVELS,
)
from gamma_mcp.exceptions import ConfigurationError


def _parse_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name}='{raw}' is not a valid number") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {value}")
    return value


def _parse_port(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name}='{raw}' is not a valid integer") from exc
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"{name}={port} out of valid range (1-65535)")
    return port


@dataclass(frozen=True)
class Config:
    """Gamma MCP server configuration."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError(
                "GAMMA_API_KEY environment variable is required",
                details={"variable": "GAMMA_API_KEY"},
            )
        if not self.base_url:
            raise ConfigurationError("GAMMA_API_BASE_URL must not be empty")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"GAMMA_LOG_LEVEL='{self.log_level}' is not one of {', '.join(VALID_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ConfigurationError: if GAMMA_API_KEY is missing or a value is malformed
        """
        env = os.environ if env is None else env
        return cls(
            api_key=env.get("GAMMA_API_KEY", ""),
            base_url=env.get("GAMMA_API_BASE_URL") or DEFAULT_BASE_URL,
            timeout_seconds=_parse_float(env, "GAMMA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            host=env.get("GAMMA_MCP_HOST") or DEFAULT_HOST,
            port=_parse_port(env, "GAMMA_MCP_PORT", DEFAULT_PORT),
            log_level=(env.get("GAMMA_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    def summary(self) -> Dict[str, Any]:
        """Configuration values safe to log (the API key is never included)."""
        return {
            "base_url": self.base_url,
            "timeout_seconds": self.timeout_seconds,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
            "api_key_set": bool(self.api_key),
        }

    def __repr__(self) -> str:
        return f"Config(base_url={self.base_url!r}, host={self.host!r}, port={self.port}, log_level={self.log_level!r})"
