"""Console logger backed by structlog.

Output goes to stderr by default: under the stdio transport stdout carries
the MCP protocol stream and must not receive log lines.
"""

import logging
import sys
from typing import IO, Any, Optional, Union

import structlog

from .base import Logger


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


class ConsoleLogger(Logger):
    """Key=value console logger."""

    def __init__(
        self,
        level: Union[int, str] = logging.INFO,
        name: str = "gamma-mcp",
        stream: Optional[IO[str]] = None,
    ):
        self.level = _resolve_level(level)
        self.name = name
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream if stream is not None else sys.stderr),
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.dev.ConsoleRenderer(colors=False),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(self.level),
            context_class=dict,
            cache_logger_on_first_use=False,
        ).bind(logger=name)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(message, **kwargs)
