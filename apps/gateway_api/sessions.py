"""
SSE Session Table.

One session per open event stream. Sessions are created when a client
opens GET /sse and removed the first time the stream is seen to close.
Only the event loop touches the table, so no locking is needed.
"""

import asyncio
import itertools
import time
from enum import Enum
from typing import Any

from gateway_obs.logging import get_logger
from gateway_obs.metrics import sse_sessions_active

logger = get_logger(__name__)


class SessionState(str, Enum):
    OPEN = "open"
    ACTIVE = "active"
    CLOSED = "closed"


class SseSession:
    """
    A client's event stream plus the handler serving its requests.

    Frames posted to /message are handed to `submit`; responses are put on
    `outbound` and written to the stream.
    """

    def __init__(self, session_id: str, handler: Any):
        self.id = session_id
        self.handler = handler
        self.state = SessionState.OPEN
        self.outbound: asyncio.Queue[dict[str, Any]] = asyncio.Queue()
        self._tasks: set[asyncio.Task] = set()

    def activate(self) -> None:
        if self.state is SessionState.OPEN:
            self.state = SessionState.ACTIVE

    def submit(self, frame: Any) -> asyncio.Task:
        """Schedule handling of an inbound frame on the running loop."""
        task = asyncio.create_task(self._process(frame))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _process(self, frame: Any) -> None:
        response = await self.handler.handle(frame)
        if response is None:
            return
        if self.state is SessionState.CLOSED:
            # In-flight calls are not cancelled on disconnect; their output is discarded.
            logger.info("sse_response_dropped", session_id=self.id, id=response.get("id"))
            return
        await self.outbound.put(response)


class SessionRegistry:
    """Open SSE sessions keyed by session ID."""

    def __init__(self):
        self._sessions: dict[str, SseSession] = {}
        self._counter = itertools.count(1)

    def _next_id(self) -> str:
        return f"{int(time.time() * 1000)}-{next(self._counter)}"

    def open(self, handler: Any) -> SseSession:
        session = SseSession(self._next_id(), handler)
        self._sessions[session.id] = session
        sse_sessions_active.inc()
        logger.info("sse_session_opened", session_id=session.id)
        return session

    def get(self, session_id: str) -> SseSession | None:
        return self._sessions.get(session_id)

    def close(self, session_id: str) -> bool:
        """Remove a session. Returns False if it was already gone."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.state = SessionState.CLOSED
        sse_sessions_active.dec()
        logger.info("sse_session_closed", session_id=session_id)
        return True

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions
