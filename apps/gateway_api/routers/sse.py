"""
SSE Transport.

- GET /sse: opens an event stream bound to a fresh MCP handler
- POST /message?sessionId=...: client-to-server frames, acknowledged with 202

The stream first sends an `endpoint` event naming the URL to post frames
to; JSON-RPC responses follow as `message` events.
"""

import json
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from sse_starlette.sse import EventSourceResponse

from apps.gateway_api.deps import get_dispatcher, get_sessions, get_settings
from apps.gateway_api.jsonrpc import McpHandler
from apps.gateway_api.sessions import SessionRegistry, SseSession
from gateway_config.settings import Settings
from gateway_obs.logging import get_logger
from gateway_tools.dispatcher import ToolDispatcher

router = APIRouter()
logger = get_logger(__name__)

MESSAGE_PATH = "/message"


async def event_stream(
    session: SseSession, sessions: SessionRegistry
) -> AsyncIterator[dict[str, Any]]:
    """Yield SSE events for a session until the client goes away."""
    try:
        yield {"event": "endpoint", "data": f"{MESSAGE_PATH}?sessionId={session.id}"}
        session.activate()
        while True:
            frame = await session.outbound.get()
            yield {"event": "message", "data": json.dumps(frame, ensure_ascii=False)}
    finally:
        sessions.close(session.id)


@router.get("/sse")
async def sse(
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
    sessions: SessionRegistry = Depends(get_sessions),
):
    session = sessions.open(McpHandler(dispatcher, settings))
    return EventSourceResponse(
        event_stream(session, sessions),
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
        ping=settings.SSE_PING_SECONDS,
    )


@router.post(MESSAGE_PATH, status_code=202)
async def message(
    request: Request,
    session_id: str | None = Query(None, alias="sessionId"),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """
    Accept a client frame for an SSE session.

    The frame is handed to the session; its response goes out on the
    stream, never in this HTTP response.
    """
    try:
        frame = await request.json()
    except ValueError:
        frame = None

    logger.info("sse_message_received", session_id=session_id, frame=frame)

    session = sessions.get(session_id) if session_id else None
    if session is None:
        logger.warning("sse_session_not_found", session_id=session_id)
    elif frame is not None:
        session.submit(frame)

    return {"received": True}
