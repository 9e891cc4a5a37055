"""Tool routing and dispatch for MCP server."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from gamma_mcp.errors import map_error_for_mcp, recovery_for
from gamma_mcp.exceptions import GammaMCPError, UnknownOperationError, ValidationError
from gamma_mcp.logger import Logger, session_logger
from gamma_mcp.mcp_server.responses import _error, _handle_validation_error, _success
from gamma_mcp.mcp_server.tool_schemas import TOOL_CATALOG, OperationDescriptor
from gamma_mcp.mcp_server.tool_types import ToolResponse
from gamma_mcp.validation.models import LEGACY_DROPPED_KEYS, LEGACY_GENERATE_KEYS, ToolArguments


class ToolDispatcher:
    """Routes tool calls to their handler and wraps every outcome in an envelope.

    All transports share one dispatcher, so argument coercion, error mapping
    and logging are identical whichever way a call arrives.
    """

    def __init__(
        self,
        client: Any,
        logger: Optional[Logger] = None,
        catalog: Iterable[OperationDescriptor] = TOOL_CATALOG,
    ):
        self._client = client
        self._logger = logger or session_logger
        self._operations: Dict[str, OperationDescriptor] = {op.name: op for op in catalog}

    @property
    def tool_names(self):
        return list(self._operations)

    def describe(self, name: str) -> OperationDescriptor:
        operation = self._operations.get(name)
        if operation is None:
            raise UnknownOperationError(name, available=self._operations.keys())
        return operation

    def parse_arguments(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolArguments:
        """Coerce a raw argument map into the operation's argument model.

        Raises:
            UnknownOperationError: if no operation is called ``name``
            ValidationError: if the arguments are not an object
            pydantic.ValidationError: if the arguments do not fit the model
        """
        operation = self.describe(name)
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ValidationError(
                f"Arguments for '{name}' must be a JSON object, got {type(arguments).__name__}",
                field="arguments",
            )
        self._warn_legacy_arguments(name, arguments)
        return operation.arguments_model.model_validate(dict(arguments))

    def _warn_legacy_arguments(self, name: str, arguments: Mapping[str, Any]) -> None:
        if name != "gamma_generate":
            return
        legacy = sorted(LEGACY_GENERATE_KEYS.intersection(arguments))
        if not legacy:
            return
        self._logger.warning(
            "Deprecated flat arguments folded into textOptions",
            tool=name,
            legacy_keys=legacy,
        )
        dropped = sorted(LEGACY_DROPPED_KEYS.intersection(arguments))
        if dropped:
            self._logger.warning(
                "Ignoring arguments that cannot be resolved; use themeId from gamma_list_themes",
                tool=name,
                dropped_keys=dropped,
            )

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResponse:
        args_keys = sorted(arguments) if isinstance(arguments, Mapping) else []
        self._logger.info("Tool invocation started", tool=name, args_keys=args_keys)

        try:
            payload = self.parse_arguments(name, arguments)
            result = await self.describe(name).handler(self._client, payload)
            self._logger.info("Tool completed successfully", tool=name)
            return _success(result)
        except UnknownOperationError as exc:
            self._logger.error("Unknown tool requested", tool=name, available_tools=exc.available)
            return _error(code=exc.code, message=exc.message, recovery=recovery_for(exc))
        except PydanticValidationError as exc:
            self._logger.error(
                "Validation error",
                tool=name,
                error_count=len(exc.errors()),
                fields=[".".join(str(part) for part in e["loc"]) for e in exc.errors()],
            )
            return _handle_validation_error(name, exc)
        except GammaMCPError as exc:
            self._logger.error(
                "Domain error",
                tool=name,
                error_code=exc.code,
                error_type=type(exc).__name__,
                status_code=getattr(exc, "status_code", None),
            )
            mapped = map_error_for_mcp(exc)
            return _error(
                code=mapped["error_code"],
                message=mapped["message"],
                recovery=mapped["recovery_strategy"],
                details=mapped["details"],
            )
        except Exception as exc:
            self._logger.error(
                "Unexpected error",
                tool=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return _error(
                code="UNEXPECTED_ERROR",
                message=f"Unexpected error in '{name}': {type(exc).__name__}: {exc}",
                recovery="This is an unexpected server error. Retry once; if it persists, check the server logs.",
            )
