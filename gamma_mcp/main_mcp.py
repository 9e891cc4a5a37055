"""Entrypoint for the Gamma MCP server (stdio or Streamable HTTP)."""

import argparse
import asyncio
import dataclasses
import sys
from typing import List, Optional

from dotenv import load_dotenv

from gamma_mcp.config import Config
from gamma_mcp.config_docs import VALID_LOG_LEVELS
from gamma_mcp.exceptions import ConfigurationError
from gamma_mcp.logger import ConsoleLogger, Logger, session_logger
from gamma_mcp.mcp_server import build_server, initialize_components
from gamma_mcp.mcp_server.server import main as serve_http
from gamma_mcp.mcp_server.server import run_stdio


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="gamma MCP Server - Gamma presentation generation via Model Context Protocol"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="MCP transport: stdio (default) or Streamable HTTP",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to for --transport http (default: GAMMA_MCP_HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on for --transport http (default: GAMMA_MCP_PORT or 3000)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging verbosity (default: GAMMA_LOG_LEVEL or INFO)",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Load Config from the environment and apply command line overrides."""
    config = Config.from_env()
    overrides = {
        key: value
        for key, value in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if value is not None
    }
    return dataclasses.replace(config, **overrides) if overrides else config


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
    server = build_server(components.dispatcher)

    try:
        if args.transport == "http":
            asyncio.run(serve_http(server, host=config.host, port=config.port, logger=logger))
        else:
            asyncio.run(run_stdio(server, logger=logger))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
