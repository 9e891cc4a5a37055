"""MCP tool catalog for the Gamma service.

Each operation is declared once, with the Pydantic model of its arguments.
The JSON Schema advertised through list_tools is generated from that model,
so what callers see and what the dispatcher enforces cannot diverge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from mcp.types import Tool

from gamma_mcp.mcp_server.tool_types import ToolHandler
from gamma_mcp.mcp_server.tools.discovery import _tool_list_folders, _tool_list_themes
from gamma_mcp.mcp_server.tools.generation import (
    _tool_create_from_template,
    _tool_generate,
    _tool_get_generation,
)
from gamma_mcp.validation.models import (
    CreateFromTemplateInput,
    GenerateInput,
    GetGenerationInput,
    ListFoldersInput,
    ListThemesInput,
)
from gamma_mcp.validation.models.common import ArgumentModel


def _resolve_ref(ref: str, defs: Dict[str, Any]) -> Dict[str, Any]:
    return defs[ref.rsplit("/", 1)[-1]]


def _simplify_schema(node: Any, defs: Dict[str, Any]) -> Any:
    """Inline $refs, collapse Optional[X] to X and drop generated titles."""
    if isinstance(node, list):
        return [_simplify_schema(item, defs) for item in node]
    if not isinstance(node, dict):
        return node

    if "$ref" in node:
        target = _simplify_schema(_resolve_ref(node["$ref"], defs), defs)
        siblings = {key: value for key, value in node.items() if key != "$ref"}
        return {**target, **_simplify_schema(siblings, defs)}

    if "anyOf" in node:
        options = [option for option in node["anyOf"] if option != {"type": "null"}]
        if len(options) == 1:
            siblings = {key: value for key, value in node.items() if key != "anyOf"}
            return {**_simplify_schema(options[0], defs), **_simplify_schema(siblings, defs)}

    simplified: Dict[str, Any] = {}
    for key, value in node.items():
        if key == "$defs":
            continue
        if key == "title" and isinstance(value, str):
            continue
        if key == "default" and value is None:
            continue
        if key == "properties":
            simplified[key] = {name: _simplify_schema(prop, defs) for name, prop in value.items()}
            continue
        simplified[key] = _simplify_schema(value, defs)
    return simplified


def build_input_schema(model: Type[ArgumentModel]) -> Dict[str, Any]:
    raw = model.model_json_schema(by_alias=True, mode="validation")
    return _simplify_schema(raw, raw.get("$defs", {}))


@dataclass(frozen=True)
class OperationDescriptor:
    """One advertised tool: name, description, argument model and handler."""

    name: str
    description: str
    arguments_model: Type[ArgumentModel]
    handler: ToolHandler

    @property
    def input_schema(self) -> Dict[str, Any]:
        return build_input_schema(self.arguments_model)

    def to_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


TOOL_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name="gamma_generate",
        description=(
            "Generation - Create a new Gamma presentation, document, webpage, or social post from text. "
            "WORKFLOW: Optionally call gamma_list_themes / gamma_list_folders first to pick a themeId and folderIds. "
            "Returns: generationId (SAVE THIS) and optional warnings. The job runs asynchronously. "
            "NEXT STEPS: Poll gamma_get_generation with the generationId until status is 'completed', then use gammaUrl. "
            "DEFAULTS: format='presentation', numCards=10. "
            "TEXT MODES: 'generate' expands a short prompt, 'condense' summarizes long text, 'preserve' keeps text as-is."
        ),
        arguments_model=GenerateInput,
        handler=_tool_generate,
    ),
    OperationDescriptor(
        name="gamma_create_from_template",
        description=(
            "Generation - Create a new gamma based on an existing template gamma, adapting it to new content "
            "while preserving its structure. "
            "Returns: generationId (SAVE THIS) and optional warnings. "
            "NEXT STEPS: Poll gamma_get_generation with the generationId until status is 'completed'."
        ),
        arguments_model=CreateFromTemplateInput,
        handler=_tool_create_from_template,
    ),
    OperationDescriptor(
        name="gamma_get_generation",
        description=(
            "Status - Get the current status and URLs of a generation started by gamma_generate or "
            "gamma_create_from_template. Returns one snapshot per call: poll until status is 'completed'. "
            "Returns: generationId, status, gammaUrl, pdfUrl/pptxUrl when exportAs was set, and credits."
        ),
        arguments_model=GetGenerationInput,
        handler=_tool_get_generation,
    ),
    OperationDescriptor(
        name="gamma_list_themes",
        description=(
            "Discovery - List themes available in your Gamma workspace. Use a theme's id as themeId. "
            "Returns: data (themes), hasMore, nextCursor. "
            "PAGINATION: When hasMore is true, call again with after=<nextCursor>."
        ),
        arguments_model=ListThemesInput,
        handler=_tool_list_themes,
    ),
    OperationDescriptor(
        name="gamma_list_folders",
        description=(
            "Discovery - List folders in your Gamma workspace. Use folder ids as folderIds to organize "
            "generated gammas. Returns: data (folders), hasMore, nextCursor. "
            "PAGINATION: When hasMore is true, call again with after=<nextCursor>."
        ),
        arguments_model=ListFoldersInput,
        handler=_tool_list_folders,
    ),
)

_CATALOG_BY_NAME: Dict[str, OperationDescriptor] = {op.name: op for op in TOOL_CATALOG}


def get_descriptor(name: str) -> Optional[OperationDescriptor]:
    return _CATALOG_BY_NAME.get(name)


def tool_names() -> List[str]:
    return [op.name for op in TOOL_CATALOG]


async def build_tools() -> List[Tool]:
    return [op.to_tool() for op in TOOL_CATALOG]
