"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from apps.gateway_api.main import create_app
from gateway_config.settings import Settings
from gateway_tools.notion.client import NotionClientWrapper


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(NOTION_API_KEY="secret_test_key_12345", _env_file=None)


@pytest.fixture
def mock_notion():
    """Mock Notion client; every wrapper method is an AsyncMock."""
    return AsyncMock(spec=NotionClientWrapper)


@pytest.fixture
def app(settings, mock_notion):
    return create_app(settings, notion_client=mock_notion)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def page_object():
    """Minimal Notion page object."""
    return {
        "object": "page",
        "id": "abc123",
        "url": "https://www.notion.so/abc123",
        "properties": {
            "title": {"title": [{"plain_text": "Test Page"}]},
        },
    }
