"""Tool Interface & Data Model.

Tool definitions advertised to clients, the request/result envelopes
passed through the dispatcher, and the protocol every tool implements.
"""

import types
from typing import Any, ClassVar, Literal, Protocol, Union, get_args, get_origin

from pydantic import BaseModel, Field

ErrorType = Literal["unknown_tool", "invalid_arguments", "upstream"]

_JSON_TYPES: dict[Any, str] = {
    str: "string",
    dict: "object",
    list: "array",
    int: "integer",
    float: "number",
    bool: "boolean",
}


def _json_type(annotation: Any) -> str:
    """Map a field annotation to a JSON Schema type name."""
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        annotation = members[0] if members else str
    base = get_origin(annotation) or annotation
    return _JSON_TYPES.get(base, "string")


class FieldSpec(BaseModel):
    """Single input field of a tool."""

    type: str
    description: str = ""
    required: bool = False


class ToolDefinition(BaseModel):
    """Immutable tool catalog entry."""

    model_config = {"frozen": True}

    name: str
    description: str
    input_fields: dict[str, FieldSpec] = Field(default_factory=dict)

    @classmethod
    def from_model(
        cls, name: str, description: str, model: type[BaseModel]
    ) -> "ToolDefinition":
        """Build a definition from a pydantic input model."""
        fields = {
            field_name: FieldSpec(
                type=_json_type(info.annotation),
                description=info.description or "",
                required=info.is_required(),
            )
            for field_name, info in model.model_fields.items()
        }
        return cls(name=name, description=description, input_fields=fields)

    def input_schema(self) -> dict[str, Any]:
        """Render the MCP-style JSON Schema for this tool's arguments."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                field_name: {"type": spec.type, "description": spec.description}
                for field_name, spec in self.input_fields.items()
            },
        }
        required = [field_name for field_name, spec in self.input_fields.items() if spec.required]
        if required:
            schema["required"] = required
        return schema

    def to_mcp(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class ToolCallRequest(BaseModel):
    """One tool invocation."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ToolCallResult(BaseModel):
    """Outcome of a tool invocation: a payload or an error message."""

    ok: bool
    payload: Any = None
    message: str | None = None
    error_type: ErrorType | None = None
    stack: str | None = None

    @classmethod
    def success(cls, payload: Any) -> "ToolCallResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(
        cls, message: str, error_type: ErrorType, stack: str | None = None
    ) -> "ToolCallResult":
        return cls(ok=False, message=message, error_type=error_type, stack=stack)


class Tool(Protocol):
    """Tool interface."""

    name: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[BaseModel]]

    @property
    def definition(self) -> ToolDefinition:
        ...

    async def execute(self, client: Any, args: BaseModel) -> dict[str, Any]:
        """Perform the upstream call for validated arguments."""
        ...
