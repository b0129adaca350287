"""
Notion MCP Gateway FastAPI Application Entry Point.

This module builds the FastAPI application with:
- CORS middleware
- Request ID injection and request logging
- Tool registry, dispatcher and SSE session table on app.state
- Routers for the enabled transports (REST, SSE, direct HTTP)

Run with `notion-mcp-gateway` or `python -m apps.gateway_api.main`.
"""

import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.gateway_api.middleware import RequestIDMiddleware, RequestLoggingMiddleware
from apps.gateway_api.routers import health, metrics, rest, rpc, sse
from apps.gateway_api.sessions import SessionRegistry
from gateway_config.settings import ConfigurationError, Settings
from gateway_obs.logging import get_logger, setup_logging
from gateway_tools.dispatcher import ToolDispatcher
from gateway_tools.notion.client import NotionClientWrapper
from gateway_tools.registry import build_registry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Logs the served surface on startup and closes the Notion client on
    shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(
        "server_started",
        service=settings.SERVICE_NAME,
        protocol_version=settings.MCP_PROTOCOL_VERSION,
        transports=sorted(settings.enabled_transports()),
        tools=app.state.dispatcher.registry.names(),
    )

    yield

    logger.info("server_stopping")
    close = getattr(app.state.dispatcher.client, "close", None)
    if close is not None:
        await close()


def create_app(settings: Settings | None = None, notion_client: Any = None) -> FastAPI:
    """
    Build the gateway application.

    Args:
        settings: Loaded settings; read from the environment when omitted
        notion_client: Notion client to dispatch to; a NotionClientWrapper
            is created from settings when omitted

    Raises:
        ConfigurationError: NOTION_API_KEY is not set
    """
    settings = settings or Settings()
    setup_logging(settings)
    api_key = settings.require_notion_api_key()

    if notion_client is None:
        notion_client = NotionClientWrapper(api_key=api_key, version=settings.NOTION_VERSION)

    app = FastAPI(
        title="Notion MCP Gateway",
        description="Notion REST API exposed as MCP tools over HTTP and SSE",
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dispatcher = ToolDispatcher(build_registry(settings.TOOL_CATALOG), notion_client)
    app.state.sessions = SessionRegistry()

    # ========================================================================
    # MIDDLEWARE
    # ========================================================================

    app.add_middleware(RequestLoggingMiddleware)
    # Wraps the logging middleware so request_id is set before it runs
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Cache-Control"],
        expose_headers=["X-Request-ID"],
    )

    # ========================================================================
    # EXCEPTION HANDLERS
    # ========================================================================

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Last-resort handler; request-level errors never stop the server."""
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "message": str(exc)},
        )

    # ========================================================================
    # ROUTERS
    # ========================================================================

    transports = settings.enabled_transports()
    app.include_router(health.router, tags=["health"])
    app.include_router(metrics.router, tags=["metrics"])
    if "rest" in transports:
        app.include_router(rest.router, prefix="/mcp", tags=["rest"])
    if "sse" in transports:
        app.include_router(sse.router, tags=["sse"])
    if "http" in transports:
        app.include_router(rpc.router, tags=["mcp"])

    return app


def main() -> None:
    """Load settings, refuse to start without a Notion key, then serve."""
    settings = Settings()

    try:
        app = create_app(settings)
    except ConfigurationError as e:
        logger.error("startup_failed", error=str(e))
        sys.exit(1)

    logger.info("server_starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
