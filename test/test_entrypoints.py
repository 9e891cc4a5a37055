"""Tests for command line entrypoints (startup only, no servers started)."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from gamma_mcp import main_mcp, main_web


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    """Keep a developer's .env file out of entrypoint tests."""
    monkeypatch.setattr(main_mcp, "load_dotenv", lambda: None)
    monkeypatch.setattr(main_web, "load_dotenv", lambda: None)


class TestMissingApiKey:
    """Startup fails with exit status 1 without GAMMA_API_KEY"""

    def test_mcp_entrypoint_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main_mcp.main(["--transport", "stdio"])
        assert exc_info.value.code == 1

    def test_web_entrypoint_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main_web.main([])
        assert exc_info.value.code == 1


class TestArgumentOverrides:
    """Command line flags override environment configuration"""

    def test_flags_override_env(self, monkeypatch):
        monkeypatch.setenv("GAMMA_API_KEY", "sk-1")
        monkeypatch.setenv("GAMMA_MCP_PORT", "4000")
        args = main_mcp.build_parser().parse_args(["--transport", "http", "--port", "5000", "--log-level", "debug"])

        config = main_mcp.load_config(args)

        assert args.transport == "http"
        assert config.port == 5000
        assert config.log_level == "DEBUG"
        assert config.host == "0.0.0.0"

    def test_env_used_without_flags(self, monkeypatch):
        monkeypatch.setenv("GAMMA_API_KEY", "sk-1")
        monkeypatch.setenv("GAMMA_MCP_PORT", "4000")

        config = main_mcp.load_config(main_mcp.build_parser().parse_args([]))

        assert config.port == 4000

    def test_invalid_transport_rejected(self):
        with pytest.raises(SystemExit):
            main_mcp.build_parser().parse_args(["--transport", "websocket"])
