"""Notion List Databases Tool.

Notion has no list-databases endpoint, so this is a search restricted to
database objects.
"""

from typing import Any

from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.notion.schemas import NotionListDatabasesInput
from gateway_tools.notion.tools.base import NotionTool

DATABASE_FILTER = {"property": "object", "value": "database"}


class NotionListDatabasesTool(NotionTool):
    name = "notion_list_databases"
    description = "List all databases the integration has access to"
    input_model = NotionListDatabasesInput

    async def execute(
        self, client: NotionClientWrapper, args: NotionListDatabasesInput
    ) -> dict[str, Any]:
        return await client.search(filter=dict(DATABASE_FILTER))
