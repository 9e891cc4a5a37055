"""Gamma API client.

Typed wrapper around the Gamma public API v1.0
(https://developers.gamma.app). Each method issues exactly one HTTP call
and returns a typed result, or raises RemoteAPIError.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from gamma_mcp.config import Config
from gamma_mcp.config_docs import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from gamma_mcp.exceptions import ConfigurationError, RemoteAPIError
from gamma_mcp.logger import Logger, session_logger
from gamma_mcp.validation.models import (
    CreateFromTemplateInput,
    FolderList,
    GenerateInput,
    GenerationResponse,
    GenerationStatus,
    ListFoldersInput,
    ListThemesInput,
    ThemeList,
)
from gamma_mcp.validation.models.common import ResponseModel

ResponseT = TypeVar("ResponseT", bound=ResponseModel)

API_KEY_HEADER = "X-API-KEY"
MAX_ERROR_BODY_CHARS = 2000
REDACTED = "[REDACTED]"


class GammaClient:
    """Client for the Gamma generation API.

    The client holds no state besides its settings; every call opens its own
    ``httpx.AsyncClient``, so concurrent calls share nothing.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: Gamma API key, sent as X-API-KEY on every request
            base_url: API root, e.g. https://public-api.gamma.app/v1.0
            timeout_seconds: Per-request timeout
            logger: Logger for request tracing
            transport: Optional httpx transport (tests inject httpx.MockTransport)

        Raises:
            ConfigurationError: if api_key is empty
        """
        if not api_key:
            raise ConfigurationError("Gamma API key is required")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._logger = logger or session_logger
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: Config,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GammaClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            logger=logger,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def __repr__(self) -> str:
        return f"GammaClient(base_url={self._base_url!r})"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def generate(self, request: GenerateInput) -> GenerationResponse:
        """Start a new presentation/document/webpage/social generation.

        POST /generations
        """
        payload = await self._request("POST", "/generations", json_body=request.to_request_body())
        return self._parse(GenerationResponse, payload, "/generations")

    async def create_from_template(self, request: CreateFromTemplateInput) -> GenerationResponse:
        """Create a gamma from an existing template gamma.

        POST /generations/from-template
        """
        path = "/generations/from-template"
        payload = await self._request("POST", path, json_body=request.to_request_body())
        return self._parse(GenerationResponse, payload, path)

    async def get_generation(self, generation_id: str) -> GenerationStatus:
        """Fetch the current status snapshot of a generation job.

        GET /generations/{generationId}. One snapshot per call; callers poll.
        """
        path = f"/generations/{quote(generation_id, safe='')}"
        payload = await self._request("GET", path)
        return self._parse(GenerationStatus, payload, path)

    async def list_themes(self, query: Optional[ListThemesInput] = None) -> ThemeList:
        """List themes in the workspace. GET /themes"""
        params = (query or ListThemesInput()).to_query_params()
        payload = await self._request("GET", "/themes", params=params)
        return self._parse(ThemeList, payload, "/themes")

    async def list_folders(self, query: Optional[ListFoldersInput] = None) -> FolderList:
        """List folders in the workspace. GET /folders"""
        params = (query or ListFoldersInput()).to_query_params()
        payload = await self._request("GET", "/folders", params=params)
        return self._parse(FolderList, payload, "/folders")

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers = {API_KEY_HEADER: self._api_key, "Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _redact(self, text: str) -> str:
        return text.replace(self._api_key, REDACTED)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        self._logger.debug(
            "Gamma API request",
            method=method,
            path=path,
            body_keys=sorted(json_body) if json_body else [],
            params=sorted(params) if params else [],
        )
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds, transport=self._transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    json=json_body,
                    params=params or None,
                    headers=self._headers(json_body is not None),
                )
        except httpx.HTTPError as exc:
            reason = self._redact(str(exc)) or type(exc).__name__
            self._logger.error(
                "Gamma API request failed",
                method=method,
                path=path,
                error_type=type(exc).__name__,
                error=reason,
            )
            raise RemoteAPIError(f"Gamma API request failed: {reason}") from exc

        if not response.is_success:
            body = self._redact(response.text)
            if len(body) > MAX_ERROR_BODY_CHARS:
                body = body[:MAX_ERROR_BODY_CHARS] + "..."
            self._logger.warning(
                "Gamma API returned error status",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise RemoteAPIError(
                f"Gamma API error ({response.status_code}): {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            snippet = self._redact(response.text[:200])
            raise RemoteAPIError(
                f"Gamma API returned a malformed response body for {path}: {snippet!r}",
                status_code=response.status_code,
                body=snippet,
            ) from exc

        self._logger.debug("Gamma API response", method=method, path=path, status_code=response.status_code)
        return payload

    @staticmethod
    def _parse(model: Type[ResponseT], payload: Any, path: str) -> ResponseT:
        try:
            return model.from_payload(payload)
        except PydanticValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
                for error in exc.errors()
            )
            raise RemoteAPIError(
                f"Gamma API returned an unexpected response shape for {path}: {problems}",
            ) from exc
