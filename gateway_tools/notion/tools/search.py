"""Notion Search Tool.

Search across the Notion workspace for pages and databases.
"""

from typing import Any

from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.notion.schemas import NotionSearchInput
from gateway_tools.notion.tools.base import NotionTool


class NotionSearchTool(NotionTool):
    """Tool for searching the Notion workspace.

    Use Cases:
    - "Find all pages about Python"
    - "Search for customer database"
    """

    name = "notion_search"
    description = "Search Notion pages and databases"
    input_model = NotionSearchInput

    async def execute(
        self, client: NotionClientWrapper, args: NotionSearchInput
    ) -> dict[str, Any]:
        return await client.search(query=args.query, filter=args.filter)
