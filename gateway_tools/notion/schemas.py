"""Notion tool input schemas.

One pydantic model per tool. Optional fields default to None and are
not forwarded to Notion when unset.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotionToolInput(BaseModel):
    """Base for tool arguments; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class NotionSearchInput(NotionToolInput):
    query: str = Field(..., description="Search query")
    filter: dict[str, Any] | None = Field(None, description="Optional filter object")


class NotionCreatePageInput(NotionToolInput):
    parent_id: str = Field(..., description="Parent page or database ID")
    title: str = Field(..., description="Page title")
    content: str | None = Field(None, description="Page content (optional)")


class NotionGetPageInput(NotionToolInput):
    page_id: str = Field(..., description="Page ID")


class NotionUpdatePageInput(NotionToolInput):
    page_id: str = Field(..., description="Page ID")
    properties: dict[str, Any] = Field(..., description="Page properties to update")


class NotionListDatabasesInput(NotionToolInput):
    pass


class NotionQueryDatabaseInput(NotionToolInput):
    database_id: str = Field(..., description="Database ID")
    filter: dict[str, Any] | None = Field(None, description="Optional filter object")
    sorts: list[dict[str, Any]] | None = Field(None, description="Optional sort array")
