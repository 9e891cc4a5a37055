"""Shared base models and value sets for Gamma API payloads.

Python attributes are snake_case; the wire names are the camelCase field
names of the Gamma v1.0 API, produced by the alias generator.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel


class ArgumentModel(BaseModel):
    """Base for tool arguments and outbound request bodies.

    Undeclared keys are ignored so nothing the schema does not name can
    reach the HTTP layer.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_request_body(self) -> dict:
        """Wire representation: aliased names, absent fields omitted (never null)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResponseModel(BaseModel):
    """Base for remote responses.

    The model checks the shape of a response; the decoded payload it was
    built from is what gets relayed, untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    _payload: Any = PrivateAttr(default=None)

    @classmethod
    def from_payload(cls, payload: Any):
        """Validate a decoded response body and keep it for relaying."""
        model = cls.model_validate(payload)
        model._payload = payload
        return model

    def to_wire(self) -> Any:
        """Reproduce the remote JSON exactly as received."""
        if self._payload is not None:
            return self._payload
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


TextMode = Literal["generate", "condense", "preserve"]
OutputFormat = Literal["presentation", "document", "webpage", "social"]
CardSplit = Literal["auto", "inputTextBreaks"]
ExportFormat = Literal["pdf", "pptx"]
TextAmount = Literal["brief", "medium", "detailed", "extensive"]
ImageSource = Literal[
    "aiGenerated",
    "pictographic",
    "unsplash",
    "webAllImages",
    "webFreeToUse",
    "webFreeToUseCommercially",
    "giphy",
    "placeholder",
    "noImages",
]
CardDimensions = Literal["fluid", "16x9", "4x3", "pageless", "letter", "a4", "1x1", "4x5", "9x16"]
HeaderFooterType = Literal["cardNumber", "image", "text"]
HeaderFooterImageSource = Literal["themeLogo", "custom"]
HeaderFooterSize = Literal["sm", "md", "lg", "xl"]
WorkspaceAccess = Literal["noAccess", "view", "comment", "edit", "fullAccess"]
ExternalAccess = Literal["noAccess", "view", "comment", "edit"]
EmailAccess = Literal["view", "comment", "edit", "fullAccess"]

# Card count ceiling of the highest plan tier (Pro allows 60, Ultra 75).
MAX_CARDS = 75
DEFAULT_NUM_CARDS = 10
DEFAULT_FORMAT = "presentation"
MAX_LIST_LIMIT = 50
MAX_ADDITIONAL_INSTRUCTIONS = 2000
