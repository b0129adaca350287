"""
MCP JSON-RPC Handler.

Shared by the SSE session transport and the direct POST /mcp endpoint.
Handles initialize, ping, notifications, tools/list and tools/call on
top of the tool registry and dispatcher.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from gateway_config.settings import Settings
from gateway_obs.logging import get_logger
from gateway_tools.base import ToolCallRequest, ToolCallResult
from gateway_tools.dispatcher import ToolDispatcher

logger = get_logger(__name__)

JSONRPC_VERSION = "2.0"

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class InvalidParamsError(Exception):
    """Request params do not match the method's contract."""

    pass


class RpcRequest(BaseModel):
    """Inbound JSON-RPC envelope."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str | None = None
    params: Any = None


def result_response(request_id: Any, result: Any) -> dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def tool_result_content(result: ToolCallResult) -> dict[str, Any]:
    """Wrap a dispatcher result as MCP tool-call content."""
    if result.ok:
        text = json.dumps(result.payload, indent=2, ensure_ascii=False, default=str)
        return {"content": [{"type": "text", "text": text}]}
    return {
        "content": [{"type": "text", "text": f"Error: {result.message}"}],
        "isError": True,
    }


class McpHandler:
    """Answers MCP requests for one client connection or HTTP request."""

    def __init__(self, dispatcher: ToolDispatcher, settings: Settings):
        self.dispatcher = dispatcher
        self.settings = settings

    def initialize(self) -> dict[str, Any]:
        return {
            "protocolVersion": self.settings.MCP_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": self.settings.SERVICE_NAME,
                "version": self.settings.SERVICE_VERSION,
            },
        }

    def list_tools(self) -> dict[str, Any]:
        return {"tools": [tool.to_mcp() for tool in self.dispatcher.registry.list_tools()]}

    async def call_tool(self, params: Any) -> dict[str, Any]:
        if not isinstance(params, dict) or not isinstance(params.get("name"), str):
            raise InvalidParamsError("tools/call requires params.name")
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            raise InvalidParamsError("params.arguments must be an object")

        result = await self.dispatcher.call_tool(
            ToolCallRequest(name=params["name"], arguments=arguments)
        )
        return tool_result_content(result)

    async def handle(self, message: Any) -> dict[str, Any] | None:
        """Handle one JSON-RPC message.

        Returns:
            The response envelope, or None for notifications.
        """
        if not isinstance(message, dict):
            return error_response(None, INVALID_REQUEST, "Invalid Request")

        request_id = message.get("id")
        try:
            request = RpcRequest.model_validate(message)
        except ValidationError:
            return error_response(request_id, INVALID_REQUEST, "Invalid Request")

        method = request.method
        if method is not None and method.startswith("notifications/"):
            logger.info("mcp_notification", method=method)
            return None

        try:
            if method == "initialize":
                result = self.initialize()
            elif method == "ping":
                result = {}
            elif method == "tools/list":
                result = self.list_tools()
            elif method == "tools/call":
                result = await self.call_tool(request.params)
            else:
                logger.warning("mcp_method_not_found", method=method, id=request_id)
                return error_response(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")
        except InvalidParamsError as e:
            return error_response(request_id, INVALID_PARAMS, str(e))
        except Exception as e:
            logger.error("mcp_request_failed", method=method, error=str(e), exc_info=True)
            return error_response(request_id, INTERNAL_ERROR, str(e))

        return result_response(request_id, result)
