"""Notion adapter exceptions.

Custom exception hierarchy for Notion API errors. Messages are the
upstream message text, unchanged.
"""


class NotionAdapterError(Exception):
    """Base exception for Notion adapter."""

    pass


class NotionAPIError(NotionAdapterError):
    """Notion answered with an error response."""

    def __init__(self, message: str, status: int | None = None, code: str | None = None):
        super().__init__(message)
        self.status = status
        self.code = code


class NotionAuthError(NotionAPIError):
    """Invalid API key or insufficient permissions."""

    pass


class NotionValidationError(NotionAPIError):
    """Request rejected by Notion (400 response)."""

    pass


class NotionResourceNotFoundError(NotionAPIError):
    """Page/database not found (404 response)."""

    pass


class NotionRateLimitError(NotionAPIError):
    """Rate limit exceeded (429 response)."""

    pass
