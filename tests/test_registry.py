"""Tool Registry Tests."""

import pytest

from gateway_tools.base import ToolDefinition
from gateway_tools.registry import ToolRegistry, build_registry

FULL_CATALOG = [
    ("notion_search", ["query"], ["filter"]),
    ("notion_create_page", ["parent_id", "title"], ["content"]),
    ("notion_get_page", ["page_id"], []),
    ("notion_update_page", ["page_id", "properties"], []),
    ("notion_list_databases", [], []),
    ("notion_query_database", ["database_id"], ["filter", "sorts"]),
]


class MockTool:
    name = "mock_tool"
    description = "Mock tool"
    definition = ToolDefinition(name="mock_tool", description="Mock tool")


def test_register_and_retrieve_tool():
    """Test tool registration and retrieval."""
    registry = ToolRegistry()
    tool = MockTool()

    registry.register(tool)
    retrieved = registry.get("mock_tool")

    assert retrieved is tool
    assert "mock_tool" in registry
    assert registry.get("missing") is None


def test_duplicate_registration_rejected():
    registry = ToolRegistry()
    registry.register(MockTool())

    with pytest.raises(ValueError, match="already registered"):
        registry.register(MockTool())


def test_full_catalog_names_and_fields():
    definitions = build_registry("full").list_tools()

    assert len(definitions) == 6
    for definition, (name, required, optional) in zip(definitions, FULL_CATALOG):
        assert definition.name == name
        schema = definition.input_schema()
        assert schema.get("required", []) == required
        assert sorted(schema["properties"]) == sorted(required + optional)


def test_core_catalog_has_four_tools():
    registry = build_registry("core")
    assert registry.names() == [
        "notion_search",
        "notion_create_page",
        "notion_get_page",
        "notion_update_page",
    ]


def test_unknown_catalog_rejected():
    with pytest.raises(ValueError):
        build_registry("huge")


def test_list_tools_is_stable():
    registry = build_registry()
    first = [tool.to_mcp() for tool in registry.list_tools()]
    second = [tool.to_mcp() for tool in registry.list_tools()]
    assert first == second


def test_input_schema_types():
    registry = build_registry()
    query_db = registry.get("notion_query_database").definition.input_schema()

    assert query_db["type"] == "object"
    assert query_db["properties"]["database_id"] == {"type": "string", "description": "Database ID"}
    assert query_db["properties"]["filter"]["type"] == "object"
    assert query_db["properties"]["sorts"]["type"] == "array"


def test_empty_schema_has_no_required_key():
    registry = build_registry()
    schema = registry.get("notion_list_databases").definition.to_mcp()["inputSchema"]
    assert schema == {"type": "object", "properties": {}}
