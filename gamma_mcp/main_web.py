"""Entrypoint for the Gamma JSON-RPC web server."""

import argparse
import sys
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from gamma_mcp.config_docs import VALID_LOG_LEVELS
from gamma_mcp.exceptions import ConfigurationError
from gamma_mcp.logger import ConsoleLogger, Logger, session_logger
from gamma_mcp.main_mcp import load_config
from gamma_mcp.mcp_server import initialize_components
from gamma_mcp.web_server import GammaWebServer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="gamma Web Server - Gamma tools over JSON-RPC 2.0")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: GAMMA_MCP_HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: GAMMA_MCP_PORT or 3000)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging verbosity (default: GAMMA_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    startup_logger: Logger = session_logger

    try:
        config = load_config(args)
    except ConfigurationError as e:
        startup_logger.error("FATAL: Invalid configuration", error=e.message, error_code=e.code)
        sys.exit(1)

    logger = ConsoleLogger(level=config.log_level)
    components = initialize_components(config=config, logger=logger)
    server = GammaWebServer(dispatcher=components.dispatcher, logger=logger)

    try:
        logger.info(
            "Starting web server",
            host=config.host,
            port=config.port,
            transport="JSON-RPC over HTTP",
        )
        uvicorn.run(server.app, host=config.host, port=config.port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
