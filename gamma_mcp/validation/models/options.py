"""Nested option groups accepted by the generation endpoints."""

from typing import List, Optional

from pydantic import Field

from gamma_mcp.validation.models.common import (
    ArgumentModel,
    CardDimensions,
    EmailAccess,
    ExternalAccess,
    HeaderFooterImageSource,
    HeaderFooterSize,
    HeaderFooterType,
    ImageSource,
    TextAmount,
    WorkspaceAccess,
)


class TextOptions(ArgumentModel):
    amount: Optional[TextAmount] = Field(None, description="How much text per card.")
    tone: Optional[str] = Field(None, description="Tone of voice, e.g. 'professional, inspiring'.")
    audience: Optional[str] = Field(None, description="Intended audience, e.g. 'tech investors'.")
    language: Optional[str] = Field(None, description="Output language code, e.g. 'en', 'sv'.")


class ImageOptions(ArgumentModel):
    source: Optional[ImageSource] = Field(None, description="Where card images come from.")
    model: Optional[str] = Field(None, description="Image model for aiGenerated images, e.g. 'flux-1-pro'.")
    style: Optional[str] = Field(None, description="Image style, e.g. 'photorealistic'.")


class TemplateImageOptions(ArgumentModel):
    model: Optional[str] = Field(None, description="Image model, e.g. 'imagen-4-pro'.")
    style: Optional[str] = Field(None, description="Image style, e.g. 'minimal lineart'.")


class HeaderFooterPosition(ArgumentModel):
    type: HeaderFooterType = Field(..., description="What to show in this slot.")
    value: Optional[str] = Field(None, description="Text to show when type is 'text'.")
    source: Optional[HeaderFooterImageSource] = Field(None, description="Image source when type is 'image'.")
    src: Optional[str] = Field(None, description="Image URL when source is 'custom'.")
    size: Optional[HeaderFooterSize] = Field(None, description="Image size when type is 'image'.")


class HeaderFooter(ArgumentModel):
    top_left: Optional[HeaderFooterPosition] = Field(None, description="Content of the top-left slot.")
    top_center: Optional[HeaderFooterPosition] = Field(None, description="Content of the top-center slot.")
    top_right: Optional[HeaderFooterPosition] = Field(None, description="Content of the top-right slot.")
    bottom_left: Optional[HeaderFooterPosition] = Field(None, description="Content of the bottom-left slot.")
    bottom_center: Optional[HeaderFooterPosition] = Field(
        None, description="Content of the bottom-center slot."
    )
    bottom_right: Optional[HeaderFooterPosition] = Field(None, description="Content of the bottom-right slot.")
    hide_from_first_card: Optional[bool] = Field(None, description="Hide header and footer on the first card.")
    hide_from_last_card: Optional[bool] = Field(None, description="Hide header and footer on the last card.")


class CardOptions(ArgumentModel):
    dimensions: Optional[CardDimensions] = Field(None, description="Card aspect ratio or page size.")
    header_footer: Optional[HeaderFooter] = Field(None, description="Header and footer content per slot.")


class EmailOptions(ArgumentModel):
    recipients: Optional[List[str]] = Field(None, description="Email addresses to share with.")
    access: Optional[EmailAccess] = Field(None, description="Access level granted to recipients.")


class SharingOptions(ArgumentModel):
    workspace_access: Optional[WorkspaceAccess] = Field(None, description="Access for workspace members.")
    external_access: Optional[ExternalAccess] = Field(None, description="Access for people outside the workspace.")
    email_options: Optional[EmailOptions] = Field(None, description="Share with specific people by email.")
