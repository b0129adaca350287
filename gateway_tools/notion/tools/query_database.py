"""Notion Query Database Tool.

Query Notion databases with filters and sorting.
"""

from typing import Any

from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.notion.schemas import NotionQueryDatabaseInput
from gateway_tools.notion.tools.base import NotionTool


class NotionQueryDatabaseTool(NotionTool):
    """Tool for querying Notion databases.

    Use Cases:
    - "Get all tasks with status 'In Progress'"
    - "List projects sorted by priority"
    """

    name = "notion_query_database"
    description = "Query a database with filters and sorts"
    input_model = NotionQueryDatabaseInput

    async def execute(
        self, client: NotionClientWrapper, args: NotionQueryDatabaseInput
    ) -> dict[str, Any]:
        return await client.query_database(
            args.database_id, filter=args.filter, sorts=args.sorts
        )
