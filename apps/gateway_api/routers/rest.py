"""
Simple REST Transport.

- GET /mcp/tools: tool catalog
- POST /mcp/execute: run one tool synchronously
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from apps.gateway_api.deps import get_dispatcher, get_settings
from gateway_config.settings import Settings
from gateway_tools.base import ToolCallRequest
from gateway_tools.dispatcher import ToolDispatcher

router = APIRouter()


class ExecuteRequest(BaseModel):
    """Body of POST /mcp/execute."""

    tool: str = Field(..., description="Tool name")
    arguments: dict[str, Any] = Field(default_factory=dict)


@router.get("/tools")
async def list_tools(dispatcher: ToolDispatcher = Depends(get_dispatcher)):
    return {"tools": [tool.to_mcp() for tool in dispatcher.registry.list_tools()]}


@router.post("/execute")
async def execute(
    body: ExecuteRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
):
    """
    Execute a tool and return the raw Notion response.

    Returns:
        200 {"result": ...} on success
        400 {"error": ...} for unknown tools or invalid arguments
        500 {"error": ..., "stack"?: ...} when the Notion call fails
    """
    result = await dispatcher.call_tool(ToolCallRequest(name=body.tool, arguments=body.arguments))

    if result.ok:
        return {"result": result.payload}

    if result.error_type in ("unknown_tool", "invalid_arguments"):
        return JSONResponse(status_code=400, content={"error": result.message})

    content = {"error": result.message}
    if settings.EXPOSE_ERROR_STACK and result.stack:
        content["stack"] = result.stack
    return JSONResponse(status_code=500, content=content)
