"""Unit tests for the Notion adapter.

Tools are exercised against a mocked client wrapper; the wrapper is
exercised against a mocked notion_client.AsyncClient.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from notion_client.errors import APIResponseError

from gateway_tools.notion import (
    NotionClientWrapper,
    NotionCreatePageTool,
    NotionGetPageTool,
    NotionListDatabasesTool,
    NotionQueryDatabaseTool,
    NotionSearchTool,
    NotionUpdatePageTool,
)
from gateway_tools.notion.exceptions import (
    NotionAdapterError,
    NotionAPIError,
    NotionAuthError,
    NotionRateLimitError,
    NotionResourceNotFoundError,
)
from gateway_tools.notion.schemas import (
    NotionCreatePageInput,
    NotionGetPageInput,
    NotionListDatabasesInput,
    NotionQueryDatabaseInput,
    NotionSearchInput,
    NotionUpdatePageInput,
)
from gateway_tools.notion.tools.create_page import paragraph_blocks, parent_reference

DATABASE_ID = "1f2e3d4c-5b6a-4798-8a7b-6c5d4e3f2a1b"


class FakeAPIResponseError(APIResponseError):
    """APIResponseError without an httpx response behind it."""

    def __init__(self, status: int, message: str, code: str = "object_not_found"):
        Exception.__init__(self, message)
        self.status = status
        self.code = code


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_client():
    """Mock NotionClientWrapper."""
    return AsyncMock(spec=NotionClientWrapper)


@pytest.fixture
def wrapper():
    """NotionClientWrapper with its SDK client replaced by mocks."""
    wrapper = NotionClientWrapper(api_key="secret_test_key_12345")
    wrapper.client = MagicMock()
    wrapper.client.search = AsyncMock(return_value={"results": []})
    wrapper.client.pages.retrieve = AsyncMock(return_value={"id": "abc123"})
    wrapper.client.pages.create = AsyncMock(return_value={"id": "new-page"})
    wrapper.client.pages.update = AsyncMock(return_value={"id": "abc123"})
    wrapper.client.databases.query = AsyncMock(return_value={"results": []})
    return wrapper


# ============================================================================
# PARENT ROUTING
# ============================================================================


def test_hyphenated_36_char_id_is_database():
    assert parent_reference(DATABASE_ID) == {"database_id": DATABASE_ID}


def test_36_char_id_without_hyphen_is_page():
    page_id = "a" * 36
    assert parent_reference(page_id) == {"page_id": page_id}


def test_hyphenated_id_of_other_length_is_page():
    assert parent_reference("abc-123") == {"page_id": "abc-123"}
    assert parent_reference(DATABASE_ID + "0") == {"page_id": DATABASE_ID + "0"}


def test_undashed_uuid_is_page():
    page_id = DATABASE_ID.replace("-", "")
    assert parent_reference(page_id) == {"page_id": page_id}


# ============================================================================
# BODY BLOCKS
# ============================================================================


@pytest.mark.parametrize("content", [None, ""])
def test_no_content_means_no_blocks(content):
    assert paragraph_blocks(content) == []


def test_content_becomes_one_paragraph():
    blocks = paragraph_blocks("Hello\nworld")

    assert len(blocks) == 1
    assert blocks[0]["type"] == "paragraph"
    rich_text = blocks[0]["paragraph"]["rich_text"]
    assert rich_text == [{"text": {"content": "Hello\nworld"}}]


# ============================================================================
# TOOLS
# ============================================================================


@pytest.mark.asyncio
async def test_search_tool_forwards_query_and_filter(mock_client):
    mock_client.search.return_value = {"results": [], "has_more": False}

    result = await NotionSearchTool().execute(
        mock_client,
        NotionSearchInput(query="Python", filter={"property": "object", "value": "page"}),
    )

    assert result == {"results": [], "has_more": False}
    mock_client.search.assert_awaited_once_with(
        query="Python", filter={"property": "object", "value": "page"}
    )


@pytest.mark.asyncio
async def test_search_tool_absent_filter_is_none(mock_client):
    await NotionSearchTool().execute(mock_client, NotionSearchInput(query="Python"))

    mock_client.search.assert_awaited_once_with(query="Python", filter=None)


@pytest.mark.asyncio
async def test_create_page_tool_under_database(mock_client):
    mock_client.create_page.return_value = {"id": "new-page-123"}

    result = await NotionCreatePageTool().execute(
        mock_client,
        NotionCreatePageInput(parent_id=DATABASE_ID, title="Meeting notes", content="Agenda"),
    )

    assert result == {"id": "new-page-123"}
    mock_client.create_page.assert_awaited_once_with(
        parent={"database_id": DATABASE_ID},
        properties={"title": {"title": [{"text": {"content": "Meeting notes"}}]}},
        children=[
            {
                "object": "block",
                "type": "paragraph",
                "paragraph": {"rich_text": [{"text": {"content": "Agenda"}}]},
            }
        ],
    )


@pytest.mark.asyncio
async def test_create_page_tool_without_content(mock_client):
    await NotionCreatePageTool().execute(
        mock_client, NotionCreatePageInput(parent_id="parent-page", title="Empty")
    )

    kwargs = mock_client.create_page.await_args.kwargs
    assert kwargs["parent"] == {"page_id": "parent-page"}
    assert kwargs["children"] == []


@pytest.mark.asyncio
async def test_get_page_tool(mock_client, page_object):
    mock_client.get_page.return_value = page_object

    result = await NotionGetPageTool().execute(mock_client, NotionGetPageInput(page_id="abc123"))

    assert result == page_object
    mock_client.get_page.assert_awaited_once_with("abc123")


@pytest.mark.asyncio
async def test_update_page_tool(mock_client):
    properties = {"Status": {"select": {"name": "Done"}}}

    await NotionUpdatePageTool().execute(
        mock_client, NotionUpdatePageInput(page_id="abc123", properties=properties)
    )

    mock_client.update_page.assert_awaited_once_with("abc123", properties)


@pytest.mark.asyncio
async def test_list_databases_tool_searches_databases(mock_client):
    await NotionListDatabasesTool().execute(mock_client, NotionListDatabasesInput())

    mock_client.search.assert_awaited_once_with(
        filter={"property": "object", "value": "database"}
    )


@pytest.mark.asyncio
async def test_query_database_tool(mock_client):
    sorts = [{"property": "Due", "direction": "ascending"}]

    await NotionQueryDatabaseTool().execute(
        mock_client, NotionQueryDatabaseInput(database_id="db-1", sorts=sorts)
    )

    mock_client.query_database.assert_awaited_once_with("db-1", filter=None, sorts=sorts)


def test_tool_names_match_catalog():
    assert NotionSearchTool.name == "notion_search"
    assert NotionCreatePageTool.name == "notion_create_page"
    assert NotionGetPageTool.name == "notion_get_page"
    assert NotionUpdatePageTool.name == "notion_update_page"
    assert NotionListDatabasesTool.name == "notion_list_databases"
    assert NotionQueryDatabaseTool.name == "notion_query_database"


# ============================================================================
# CLIENT WRAPPER
# ============================================================================


@pytest.mark.asyncio
async def test_wrapper_search_drops_unspecified_arguments(wrapper):
    await wrapper.search(query="Python")

    wrapper.client.search.assert_awaited_once_with(query="Python")


@pytest.mark.asyncio
async def test_wrapper_search_without_query(wrapper):
    await wrapper.search(filter={"property": "object", "value": "database"})

    wrapper.client.search.assert_awaited_once_with(
        filter={"property": "object", "value": "database"}
    )


@pytest.mark.asyncio
async def test_wrapper_query_database_keeps_empty_filter(wrapper):
    await wrapper.query_database("db-1", filter={})

    wrapper.client.databases.query.assert_awaited_once_with(database_id="db-1", filter={})


@pytest.mark.asyncio
async def test_wrapper_query_database_without_options(wrapper):
    await wrapper.query_database("db-1")

    wrapper.client.databases.query.assert_awaited_once_with(database_id="db-1")


@pytest.mark.asyncio
async def test_wrapper_create_page(wrapper):
    result = await wrapper.create_page(
        parent={"page_id": "p"}, properties={"title": {"title": []}}
    )

    assert result == {"id": "new-page"}
    wrapper.client.pages.create.assert_awaited_once_with(
        parent={"page_id": "p"}, properties={"title": {"title": []}}, children=[]
    )


@pytest.mark.asyncio
async def test_wrapper_get_and_update_page(wrapper):
    await wrapper.get_page("abc123")
    await wrapper.update_page("abc123", {"Done": {"checkbox": True}})

    wrapper.client.pages.retrieve.assert_awaited_once_with(page_id="abc123")
    wrapper.client.pages.update.assert_awaited_once_with(
        page_id="abc123", properties={"Done": {"checkbox": True}}
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status,expected",
    [
        (401, NotionAuthError),
        (404, NotionResourceNotFoundError),
        (429, NotionRateLimitError),
        (409, NotionAPIError),
    ],
)
async def test_wrapper_maps_api_errors(wrapper, status, expected):
    wrapper.client.pages.retrieve.side_effect = FakeAPIResponseError(status, "Not found")

    with pytest.raises(expected) as exc_info:
        await wrapper.get_page("abc123")

    assert str(exc_info.value) == "Not found"
    assert exc_info.value.status == status


@pytest.mark.asyncio
async def test_adapter_errors_share_base_class(wrapper):
    wrapper.client.search.side_effect = FakeAPIResponseError(401, "API token is invalid.")

    with pytest.raises(NotionAdapterError, match="API token is invalid."):
        await wrapper.search(query="x")
