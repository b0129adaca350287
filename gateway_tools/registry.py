"""Tool Registry.

Static, ordered catalog of the tools this gateway exposes.
"""

from typing import Any

from gateway_tools.base import ToolDefinition


class ToolRegistry:
    """Tool registry with name-based lookup, preserving registration order."""

    def __init__(self):
        self._tools: dict[str, Any] = {}

    def register(self, tool: Any) -> None:
        """Register a tool."""
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Any | None:
        """Get tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[ToolDefinition]:
        """Definitions of all registered tools, in registration order."""
        return [tool.definition for tool in self._tools.values()]

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(catalog: str = "full") -> ToolRegistry:
    """Build the Notion tool catalog.

    Args:
        catalog: "full" for all six tools, "core" for the four
            page/search tools without the database tools.
    """
    from gateway_tools.notion.tools import CORE_TOOLS, DATABASE_TOOLS

    tool_classes = list(CORE_TOOLS)
    if catalog == "full":
        tool_classes.extend(DATABASE_TOOLS)
    elif catalog != "core":
        raise ValueError(f"Unknown tool catalog: {catalog}")

    registry = ToolRegistry()
    for tool_class in tool_classes:
        registry.register(tool_class())
    return registry
