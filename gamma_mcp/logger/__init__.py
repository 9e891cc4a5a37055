"""
Logger module for gamma-mcp

This module provides a small logging interface that allows users to
drop in their own logger implementations. Messages take structured
keyword fields instead of preformatted strings.

Usage:
    from gamma_mcp.logger import Logger, ConsoleLogger

    logger = ConsoleLogger()
    logger.info("Tool completed successfully", tool="gamma_generate")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .base import Logger
from .console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "ConsoleLogger",
    "session_logger",
]
