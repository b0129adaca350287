"""Notion adapter.

Provides the Notion client wrapper and the tools exposed by the gateway:
- Search workspace
- Create, read and update pages
- List and query databases

Usage:
    from gateway_tools.notion import NotionClientWrapper
    from gateway_tools.registry import build_registry

    client = NotionClientWrapper(api_key="secret_...")
    registry = build_registry("full")
"""

from .client import NotionClientWrapper
from .exceptions import (
    NotionAdapterError,
    NotionAPIError,
    NotionAuthError,
    NotionRateLimitError,
    NotionResourceNotFoundError,
    NotionValidationError,
)
from .tools import (
    NotionCreatePageTool,
    NotionGetPageTool,
    NotionListDatabasesTool,
    NotionQueryDatabaseTool,
    NotionSearchTool,
    NotionUpdatePageTool,
)

__all__ = [
    # Client
    "NotionClientWrapper",
    # Exceptions
    "NotionAdapterError",
    "NotionAPIError",
    "NotionAuthError",
    "NotionRateLimitError",
    "NotionResourceNotFoundError",
    "NotionValidationError",
    # Tools
    "NotionSearchTool",
    "NotionCreatePageTool",
    "NotionGetPageTool",
    "NotionUpdatePageTool",
    "NotionListDatabasesTool",
    "NotionQueryDatabaseTool",
]
