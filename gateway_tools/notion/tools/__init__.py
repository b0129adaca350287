"""Notion tools package.

Exports all Notion tools in catalog order.
"""

from .search import NotionSearchTool
from .create_page import NotionCreatePageTool
from .get_page import NotionGetPageTool
from .update_page import NotionUpdatePageTool
from .list_databases import NotionListDatabasesTool
from .query_database import NotionQueryDatabaseTool

CORE_TOOLS = (
    NotionSearchTool,
    NotionCreatePageTool,
    NotionGetPageTool,
    NotionUpdatePageTool,
)

DATABASE_TOOLS = (
    NotionListDatabasesTool,
    NotionQueryDatabaseTool,
)

__all__ = [
    "CORE_TOOLS",
    "DATABASE_TOOLS",
    "NotionSearchTool",
    "NotionCreatePageTool",
    "NotionGetPageTool",
    "NotionUpdatePageTool",
    "NotionListDatabasesTool",
    "NotionQueryDatabaseTool",
]
