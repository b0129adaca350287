"""Notion Get Page Tool."""

from typing import Any

from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.notion.schemas import NotionGetPageInput
from gateway_tools.notion.tools.base import NotionTool


class NotionGetPageTool(NotionTool):
    """Retrieve a page object (metadata and properties) by ID."""

    name = "notion_get_page"
    description = "Get a Notion page by ID"
    input_model = NotionGetPageInput

    async def execute(
        self, client: NotionClientWrapper, args: NotionGetPageInput
    ) -> dict[str, Any]:
        return await client.get_page(args.page_id)
