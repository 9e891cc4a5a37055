"""Discovery tool handlers (themes and folders)."""

from __future__ import annotations

from typing import Any

from gamma_mcp.validation.models import FolderList, ListFoldersInput, ListThemesInput, ThemeList


async def _tool_list_themes(client: Any, payload: ListThemesInput) -> ThemeList:
    return await client.list_themes(payload)


async def _tool_list_folders(client: Any, payload: ListFoldersInput) -> FolderList:
    return await client.list_folders(payload)
