"""Shared base for Notion tools."""

from functools import cached_property
from typing import Any, ClassVar

from pydantic import BaseModel

from gateway_tools.base import ToolDefinition


class NotionTool:
    """A named Notion operation backed by exactly one client call."""

    name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[BaseModel]]

    @cached_property
    def definition(self) -> ToolDefinition:
        return ToolDefinition.from_model(self.name, self.description, self.input_model)

    async def execute(self, client: Any, args: BaseModel) -> dict[str, Any]:
        raise NotImplementedError
