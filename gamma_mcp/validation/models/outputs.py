"""Response models for the Gamma API.

Only the fields this service reads are typed. Everything else the remote
returns, including fields that are documented but relayed without being
read, is kept as received: ``to_wire()`` hands back the decoded body.
"""

from typing import Any, List, Optional

from gamma_mcp.validation.models.common import ResponseModel


class GenerationResponse(ResponseModel):
    """Result of submitting a generation job."""

    generation_id: str
    warnings: Any = None


class GenerationStatus(ResponseModel):
    """Snapshot of a generation job as currently known by the service.

    ``status`` is relayed as-is; a completed job without URLs is not
    treated specially, and ``error``/``progress``/``credits`` keep whatever
    shape the service sent.
    """

    status: str
    generation_id: Optional[str] = None
    gamma_url: Any = None
    pdf_url: Any = None
    pptx_url: Any = None
    progress: Any = None
    error: Any = None
    credits: Any = None


class Theme(ResponseModel):
    id: str
    name: Any = None
    type: Any = None
    color_keywords: Any = None
    tone_keywords: Any = None


class Folder(ResponseModel):
    id: str
    name: Any = None


class ThemeList(ResponseModel):
    data: List[Theme]
    has_more: Any = False
    next_cursor: Any = None


class FolderList(ResponseModel):
    data: List[Folder]
    has_more: Any = False
    next_cursor: Any = None
