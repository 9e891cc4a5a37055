"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a clean GAMMA_* environment, a
quiet logger, an httpx.MockTransport recorder for the Gamma API client,
and a fake client for dispatcher-level tests.
"""

import io
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gamma_mcp.client import GammaClient
from gamma_mcp.logger import ConsoleLogger
from gamma_mcp.mcp_server.routing import ToolDispatcher
from gamma_mcp.validation.models import (
    FolderList,
    GenerationResponse,
    GenerationStatus,
    ThemeList,
)

TEST_API_KEY = "sk-gamma-test-0123456789"
TEST_BASE_URL = "https://gamma.test/v1.0"

GAMMA_ENV_VARS = (
    "GAMMA_API_KEY",
    "GAMMA_API_BASE_URL",
    "GAMMA_TIMEOUT_SECONDS",
    "GAMMA_LOG_LEVEL",
    "GAMMA_MCP_HOST",
    "GAMMA_MCP_PORT",
)


@pytest.fixture(autouse=True)
def _clean_gamma_env(monkeypatch):
    """Ensure no GAMMA_* variable from the developer's shell leaks into tests."""
    for name in GAMMA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def test_logger(log_stream):
    """Logger writing to an in-memory stream so tests can inspect output."""
    return ConsoleLogger(level="DEBUG", stream=log_stream)


class RecordingTransport:
    """Wraps httpx.MockTransport and remembers every request it served.

    ``responses`` is consumed in order; the last one repeats when exhausted.
    """

    def __init__(self, responses: List[httpx.Response]):
        self._responses = list(responses)
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_client(test_logger) -> Callable[..., tuple]:
    """Factory: make_client(*responses) -> (GammaClient, RecordingTransport)."""

    def _make(*responses: httpx.Response):
        recorder = RecordingTransport(list(responses) or [httpx.Response(200, json={})])
        client = GammaClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            timeout_seconds=5,
            logger=test_logger,
            transport=recorder.transport,
        )
        return client, recorder

    return _make


class FakeGammaClient:
    """In-memory stand-in for GammaClient used by dispatcher tests."""

    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[tuple] = []
        self.error = error

    def _record(self, operation: str, payload: Any) -> None:
        self.calls.append((operation, payload))
        if self.error is not None:
            raise self.error

    async def generate(self, request):
        self._record("generate", request)
        return GenerationResponse.model_validate({"generationId": "gen-123"})

    async def create_from_template(self, request):
        self._record("create_from_template", request)
        return GenerationResponse.model_validate({"generationId": "gen-456", "warnings": "theme ignored"})

    async def get_generation(self, generation_id):
        self._record("get_generation", generation_id)
        return GenerationStatus.model_validate(
            {"generationId": generation_id, "status": "pending"}
        )

    async def list_themes(self, query=None):
        self._record("list_themes", query)
        return ThemeList.model_validate(
            {"data": [{"id": "t1", "name": "Oasis", "type": "standard"}], "hasMore": False, "nextCursor": None}
        )

    async def list_folders(self, query=None):
        self._record("list_folders", query)
        return FolderList.model_validate({"data": [{"id": "f1", "name": "Decks"}], "hasMore": False})


@pytest.fixture
def fake_client() -> FakeGammaClient:
    return FakeGammaClient()


@pytest.fixture
def dispatcher(fake_client, test_logger) -> ToolDispatcher:
    return ToolDispatcher(fake_client, logger=test_logger)
