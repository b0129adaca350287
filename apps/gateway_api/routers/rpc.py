"""
Direct MCP-over-HTTP Transport.

POST /mcp takes one JSON-RPC request and answers it in the HTTP response.
Tool failures are in-band (`result.isError`), so they still return 200.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from apps.gateway_api.deps import get_dispatcher, get_settings
from apps.gateway_api.jsonrpc import (
    INTERNAL_ERROR,
    PARSE_ERROR,
    McpHandler,
    error_response,
)
from gateway_config.settings import Settings
from gateway_obs.logging import get_logger
from gateway_tools.dispatcher import ToolDispatcher

router = APIRouter()
logger = get_logger(__name__)


@router.post("/mcp")
async def mcp(
    request: Request,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
):
    try:
        message = await request.json()
    except ValueError:
        logger.warning("mcp_parse_error")
        return JSONResponse(status_code=400, content=error_response(None, PARSE_ERROR, "Parse error"))

    logger.info("mcp_request_received", message=message)

    response = await McpHandler(dispatcher, settings).handle(message)
    if response is None:
        return {"received": True}

    if "error" in response:
        status_code = 500 if response["error"]["code"] == INTERNAL_ERROR else 400
        return JSONResponse(status_code=status_code, content=response)
    return response
