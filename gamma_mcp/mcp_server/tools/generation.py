"""Generation tool handlers."""

from __future__ import annotations

from typing import Any

from gamma_mcp.validation.models import (
    CreateFromTemplateInput,
    GenerateInput,
    GenerationResponse,
    GenerationStatus,
    GetGenerationInput,
)


async def _tool_generate(client: Any, payload: GenerateInput) -> GenerationResponse:
    return await client.generate(payload)


async def _tool_create_from_template(client: Any, payload: CreateFromTemplateInput) -> GenerationResponse:
    return await client.create_from_template(payload)


async def _tool_get_generation(client: Any, payload: GetGenerationInput) -> GenerationStatus:
    # One snapshot per call, relayed as-is
    return await client.get_generation(payload.generation_id)
