"""Notion Update Page Tool."""

from typing import Any

from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.notion.schemas import NotionUpdatePageInput
from gateway_tools.notion.tools.base import NotionTool


class NotionUpdatePageTool(NotionTool):
    """Update page properties.

    `properties` is passed to Notion as given, in Notion's own property
    value format.
    """

    name = "notion_update_page"
    description = "Update a Notion page"
    input_model = NotionUpdatePageInput

    async def execute(
        self, client: NotionClientWrapper, args: NotionUpdatePageInput
    ) -> dict[str, Any]:
        return await client.update_page(args.page_id, args.properties)
