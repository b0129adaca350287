"""Notion MCP Gateway Tool System.

Tool data model, registry and dispatcher.
"""

from gateway_tools.base import (
    FieldSpec,
    Tool,
    ToolCallRequest,
    ToolCallResult,
    ToolDefinition,
)
from gateway_tools.dispatcher import ToolDispatcher
from gateway_tools.registry import ToolRegistry, build_registry

__all__ = [
    "FieldSpec",
    "Tool",
    "ToolCallRequest",
    "ToolCallResult",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolRegistry",
    "build_registry",
]
