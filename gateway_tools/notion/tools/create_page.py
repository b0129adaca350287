"""Notion Create Page Tool.

Create a titled page under a page or database, optionally with a single
paragraph of body text.
"""

from typing import Any

from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.notion.schemas import NotionCreatePageInput
from gateway_tools.notion.tools.base import NotionTool

# Length of a hyphenated UUID, e.g. "1f2e3d4c-5b6a-4798-8a7b-6c5d4e3f2a1b"
HYPHENATED_ID_LENGTH = 36


def parent_reference(parent_id: str) -> dict[str, str]:
    """Choose the parent reference type for a parent ID.

    Hyphenated 36-character IDs are treated as databases, anything else
    as pages.
    """
    if "-" in parent_id and len(parent_id) == HYPHENATED_ID_LENGTH:
        return {"database_id": parent_id}
    return {"page_id": parent_id}


def title_properties(title: str) -> dict[str, Any]:
    return {"title": {"title": [{"text": {"content": title}}]}}


def paragraph_blocks(content: str | None) -> list[dict[str, Any]]:
    """One paragraph block holding `content`, or no blocks when empty."""
    if not content:
        return []
    return [
        {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": [{"text": {"content": content}}]},
        }
    ]


class NotionCreatePageTool(NotionTool):
    """Tool for creating new Notion pages.

    Use Cases:
    - "Create a summary page for research findings"
    - "Add a new entry to the project database"
    """

    name = "notion_create_page"
    description = "Create a new page in Notion"
    input_model = NotionCreatePageInput

    async def execute(
        self, client: NotionClientWrapper, args: NotionCreatePageInput
    ) -> dict[str, Any]:
        return await client.create_page(
            parent=parent_reference(args.parent_id),
            properties=title_properties(args.title),
            children=paragraph_blocks(args.content),
        )
