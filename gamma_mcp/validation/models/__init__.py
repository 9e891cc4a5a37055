"""Request and response models for the Gamma API and its MCP tools."""

from gamma_mcp.validation.models.inputs import (
    LEGACY_DROPPED_KEYS,
    LEGACY_GENERATE_KEYS,
    CreateFromTemplateInput,
    GenerateInput,
    GetGenerationInput,
    ListFoldersInput,
    ListResourcesInput,
    ListThemesInput,
    ToolArguments,
)
from gamma_mcp.validation.models.options import (
    CardOptions,
    EmailOptions,
    HeaderFooter,
    HeaderFooterPosition,
    ImageOptions,
    SharingOptions,
    TemplateImageOptions,
    TextOptions,
)
from gamma_mcp.validation.models.outputs import (
    Folder,
    FolderList,
    GenerationResponse,
    GenerationStatus,
    Theme,
    ThemeList,
)

__all__ = [
    "GenerateInput",
    "CreateFromTemplateInput",
    "GetGenerationInput",
    "ListResourcesInput",
    "ListThemesInput",
    "ListFoldersInput",
    "ToolArguments",
    "LEGACY_GENERATE_KEYS",
    "LEGACY_DROPPED_KEYS",
    "TextOptions",
    "ImageOptions",
    "TemplateImageOptions",
    "CardOptions",
    "HeaderFooter",
    "HeaderFooterPosition",
    "SharingOptions",
    "EmailOptions",
    "GenerationResponse",
    "GenerationStatus",
    "Theme",
    "ThemeList",
    "Folder",
    "FolderList",
]
