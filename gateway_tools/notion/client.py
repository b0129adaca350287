"""Notion API client wrapper.

Thin async wrapper over notion_client.AsyncClient. Retries, pagination
and rate limiting are left to Notion and the SDK; this layer only drops
unspecified arguments and maps SDK errors to adapter exceptions.
"""

from typing import Any

from notion_client import AsyncClient
from notion_client.errors import APIResponseError, HTTPResponseError, RequestTimeoutError

from .exceptions import (
    NotionAdapterError,
    NotionAPIError,
    NotionAuthError,
    NotionRateLimitError,
    NotionResourceNotFoundError,
    NotionValidationError,
)

_ERRORS_BY_STATUS: dict[int, type[NotionAPIError]] = {
    400: NotionValidationError,
    401: NotionAuthError,
    403: NotionAuthError,
    404: NotionResourceNotFoundError,
    429: NotionRateLimitError,
}


def _specified(**kwargs: Any) -> dict[str, Any]:
    """Keep only arguments the caller actually supplied."""
    return {key: value for key, value in kwargs.items() if value is not None}


class NotionClientWrapper:
    """Notion API client used by the tool dispatcher."""

    def __init__(self, api_key: str, version: str = "2022-06-28"):
        """Initialize Notion client.

        Args:
            api_key: Notion integration API key
            version: Notion API version
        """
        self.client = AsyncClient(auth=api_key, notion_version=version)

    def _handle_error(self, error: Exception) -> None:
        """Map notion_client errors to adapter exceptions."""
        message = str(error)

        if isinstance(error, APIResponseError):
            error_class = _ERRORS_BY_STATUS.get(error.status, NotionAPIError)
            code = getattr(error.code, "value", error.code)
            raise error_class(message, status=error.status, code=code) from error
        raise NotionAdapterError(message) from error

    async def search(
        self,
        query: str | None = None,
        filter: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Search pages and databases shared with the integration.

        Args:
            query: Search text; omitted searches everything
            filter: Notion search filter object
        """
        try:
            return await self.client.search(**_specified(query=query, filter=filter))
        except (APIResponseError, HTTPResponseError, RequestTimeoutError) as e:
            self._handle_error(e)
            raise  # For type checker

    async def get_page(self, page_id: str) -> dict[str, Any]:
        """Retrieve page metadata and properties."""
        try:
            return await self.client.pages.retrieve(page_id=page_id)
        except (APIResponseError, HTTPResponseError, RequestTimeoutError) as e:
            self._handle_error(e)
            raise

    async def create_page(
        self,
        parent: dict[str, str],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create new page.

        Args:
            parent: Parent page or database reference
            properties: Page properties (title, etc.)
            children: Page content blocks
        """
        try:
            return await self.client.pages.create(
                parent=parent,
                properties=properties,
                children=children or [],
            )
        except (APIResponseError, HTTPResponseError, RequestTimeoutError) as e:
            self._handle_error(e)
            raise

    async def update_page(self, page_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Update page properties."""
        try:
            return await self.client.pages.update(page_id=page_id, properties=properties)
        except (APIResponseError, HTTPResponseError, RequestTimeoutError) as e:
            self._handle_error(e)
            raise

    async def query_database(
        self,
        database_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Query database with optional filter and sorts.

        Args:
            database_id: Notion database ID
            filter: Notion filter object
            sorts: Sort configurations
        """
        try:
            return await self.client.databases.query(
                database_id=database_id, **_specified(filter=filter, sorts=sorts)
            )
        except (APIResponseError, HTTPResponseError, RequestTimeoutError) as e:
            self._handle_error(e)
            raise

    async def close(self) -> None:
        await self.client.aclose()
