"""Tool Dispatcher.

Routes a ToolCallRequest to exactly one Notion client call and folds the
outcome into a ToolCallResult. Nothing raised by the client escapes.
"""

import time
import traceback
from typing import Any

from pydantic import ValidationError

from gateway_obs.logging import get_logger
from gateway_obs.metrics import tool_call_duration, tool_calls_total
from gateway_tools.base import ToolCallRequest, ToolCallResult
from gateway_tools.registry import ToolRegistry

logger = get_logger(__name__)


def _validation_message(tool_name: str, error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid arguments for {tool_name}: {details}"


class ToolDispatcher:
    """Validates tool arguments and performs the matching Notion call."""

    def __init__(self, registry: ToolRegistry, client: Any):
        self.registry = registry
        self.client = client

    async def call_tool(self, request: ToolCallRequest) -> ToolCallResult:
        """Execute one tool call.

        Returns:
            ToolCallResult with the Notion response as payload, or an
            error message. Unknown tools and invalid arguments never reach
            the client; client failures are not retried.
        """
        logger.info("tool_call_started", tool=request.name, arguments=request.arguments)

        tool = self.registry.get(request.name)
        if tool is None:
            tool_calls_total.labels(tool_name="unknown", status="unknown_tool").inc()
            logger.warning("tool_call_unknown_tool", tool=request.name)
            return ToolCallResult.failure(f"Unknown tool: {request.name}", "unknown_tool")

        try:
            args = tool.input_model.model_validate(request.arguments)
        except ValidationError as e:
            message = _validation_message(tool.name, e)
            tool_calls_total.labels(tool_name=tool.name, status="invalid_arguments").inc()
            logger.warning("tool_call_invalid_arguments", tool=tool.name, error=message)
            return ToolCallResult.failure(message, "invalid_arguments")

        start_time = time.perf_counter()
        try:
            payload = await tool.execute(self.client, args)
        except Exception as e:
            tool_calls_total.labels(tool_name=tool.name, status="failure").inc()
            logger.error("tool_call_failed", tool=tool.name, error=str(e), exc_info=True)
            return ToolCallResult.failure(str(e), "upstream", stack=traceback.format_exc())
        finally:
            tool_call_duration.labels(tool_name=tool.name).observe(
                time.perf_counter() - start_time
            )

        tool_calls_total.labels(tool_name=tool.name, status="success").inc()
        logger.info("tool_call_succeeded", tool=tool.name)
        return ToolCallResult.success(payload)
