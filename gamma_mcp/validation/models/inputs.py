"""Argument models for the Gamma MCP tools.

Each tool has exactly one argument model. The model is both the schema
advertised to callers and the coercion step the dispatcher applies, and
an instance of it is the request the API client serializes.
"""

from typing import Any, Dict, FrozenSet, List, Optional, Union

from pydantic import Field, model_validator

from gamma_mcp.validation.models.common import (
    DEFAULT_FORMAT,
    DEFAULT_NUM_CARDS,
    MAX_ADDITIONAL_INSTRUCTIONS,
    MAX_CARDS,
    MAX_LIST_LIMIT,
    ArgumentModel,
    CardSplit,
    ExportFormat,
    OutputFormat,
    TextMode,
)
from gamma_mcp.validation.models.options import (
    CardOptions,
    ImageOptions,
    SharingOptions,
    TemplateImageOptions,
    TextOptions,
)

# Flat argument names from the first release of the generate tool, mapped to
# their place in textOptions. They are still accepted but deprecated.
LEGACY_TEXT_OPTION_KEYS: Dict[str, str] = {
    "textTone": "tone",
    "textAudience": "audience",
    "textAmount": "amount",
    "textLanguage": "language",
}
LEGACY_AMOUNT_VALUES: Dict[str, str] = {"short": "brief", "long": "detailed"}
# Accepted and discarded: there is no way to turn a theme name into an id here.
LEGACY_DROPPED_KEYS: FrozenSet[str] = frozenset({"themeName"})
LEGACY_GENERATE_KEYS: FrozenSet[str] = frozenset(LEGACY_TEXT_OPTION_KEYS) | LEGACY_DROPPED_KEYS


class GenerateInput(ArgumentModel):
    """Input for gamma_generate.

    Args:
        input_text: Seed content, a short prompt or long text with image URLs
        text_mode: generate (expand), condense (summarize) or preserve (keep as-is)
        format: Type of artifact, defaults to presentation
        num_cards: Number of cards, defaults to 10
        text_options/image_options/card_options/sharing_options: nested option groups
    """

    input_text: str = Field(
        ...,
        min_length=1,
        description="Content for the gamma. Can be a brief prompt or detailed text with image URLs.",
    )
    text_mode: TextMode = Field(
        ...,
        description="How to treat inputText: generate (expand), condense (summarize), preserve (keep as-is).",
    )
    format: OutputFormat = Field(DEFAULT_FORMAT, description="Type of artifact to create.")
    theme_id: Optional[str] = Field(None, description="Theme ID (use gamma_list_themes to find one).")
    num_cards: int = Field(
        DEFAULT_NUM_CARDS,
        ge=1,
        le=MAX_CARDS,
        description="Number of cards (1-60 on Pro, 1-75 on Ultra).",
    )
    card_split: Optional[CardSplit] = Field(None, description="How to divide content into cards.")
    additional_instructions: Optional[str] = Field(
        None,
        min_length=1,
        max_length=MAX_ADDITIONAL_INSTRUCTIONS,
        description="Extra specifications (1-2000 chars).",
    )
    folder_ids: Optional[List[str]] = Field(None, description="Folder IDs to store the gamma in.")
    export_as: Optional[ExportFormat] = Field(None, description="Also export as this file format.")
    text_options: Optional[TextOptions] = Field(None, description="Text amount, tone, audience and language.")
    image_options: Optional[ImageOptions] = Field(None, description="Image source, model and style.")
    card_options: Optional[CardOptions] = Field(None, description="Card dimensions and header/footer.")
    sharing_options: Optional[SharingOptions] = Field(None, description="Workspace, external and email sharing.")

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_arguments(cls, data: Any) -> Any:
        """Fold the deprecated flat text arguments into textOptions."""
        if not isinstance(data, dict) or not LEGACY_GENERATE_KEYS.intersection(data):
            return data
        data = dict(data)
        for key in LEGACY_DROPPED_KEYS:
            data.pop(key, None)

        legacy: Dict[str, Any] = {}
        for flat_key, nested_key in LEGACY_TEXT_OPTION_KEYS.items():
            value = data.pop(flat_key, None)
            if value is None:
                continue
            if nested_key == "amount" and isinstance(value, str):
                value = LEGACY_AMOUNT_VALUES.get(value, value)
            legacy[nested_key] = value

        if legacy:
            existing = data.get("textOptions", data.get("text_options"))
            if isinstance(existing, dict):
                # Explicit nested values win over legacy flat ones.
                legacy.update(existing)
            elif existing is not None:
                return data
            data.pop("text_options", None)
            data["textOptions"] = legacy
        return data


class CreateFromTemplateInput(ArgumentModel):
    """Input for gamma_create_from_template."""

    gamma_id: str = Field(..., min_length=1, description="ID of the template gamma to base this on.")
    prompt: str = Field(
        ...,
        min_length=1,
        description="Text content, image URLs and instructions for adapting the template.",
    )
    theme_id: Optional[str] = Field(None, description="Override the template's theme.")
    folder_ids: Optional[List[str]] = Field(None, description="Folder IDs to store the gamma in.")
    export_as: Optional[ExportFormat] = Field(None, description="Also export as this file format.")
    image_options: Optional[TemplateImageOptions] = Field(None, description="Image model and style.")
    sharing_options: Optional[SharingOptions] = Field(None, description="Workspace, external and email sharing.")


class GetGenerationInput(ArgumentModel):
    """Input for gamma_get_generation."""

    generation_id: str = Field(
        ...,
        min_length=1,
        description="Generation ID returned by gamma_generate or gamma_create_from_template.",
    )


class ListResourcesInput(ArgumentModel):
    """Shared filter for the listing tools. ``after`` is an opaque cursor."""

    query: Optional[str] = Field(None, description="Search by name (case-insensitive).")
    limit: Optional[int] = Field(None, ge=1, le=MAX_LIST_LIMIT, description="Number of items to return (max 50).")
    after: Optional[str] = Field(None, description="Cursor from a previous page's nextCursor.")

    def to_query_params(self) -> Dict[str, str]:
        return {key: str(value) for key, value in self.to_request_body().items()}


class ListThemesInput(ListResourcesInput):
    """Input for gamma_list_themes."""


class ListFoldersInput(ListResourcesInput):
    """Input for gamma_list_folders."""


ToolArguments = Union[
    GenerateInput,
    CreateFromTemplateInput,
    GetGenerationInput,
    ListThemesInput,
    ListFoldersInput,
]
