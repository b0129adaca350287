"""
Service Descriptor and Health Endpoints.

- GET /: service descriptor (name, version, advertised endpoints)
- GET /health: liveness probe
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from apps.gateway_api.deps import get_settings
from gateway_config.settings import Settings

router = APIRouter()

_TRANSPORT_LABELS = {"rest": "REST", "sse": "SSE", "http": "HTTP"}

_TRANSPORT_ENDPOINTS = {
    "rest": {"tools": "/mcp/tools", "execute": "/mcp/execute (POST)"},
    "sse": {"sse": "/sse", "message": "/message (POST)"},
    "http": {"mcp": "/mcp (POST)"},
}


@router.get("/")
async def root(settings: Settings = Depends(get_settings)):
    """
    Root endpoint - service information.

    Only endpoints of enabled transports are advertised.
    """
    transports = [name for name in ("sse", "http", "rest") if name in settings.enabled_transports()]
    endpoints = {"health": "/health", "metrics": "/metrics"}
    for name in transports:
        endpoints.update(_TRANSPORT_ENDPOINTS[name])

    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "protocol": "MCP",
        "protocolVersion": settings.MCP_PROTOCOL_VERSION,
        "transports": [_TRANSPORT_LABELS[name] for name in transports],
        "endpoints": endpoints,
    }


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """
    Liveness probe - is the server process running?

    Does not contact Notion.
    """
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "protocol": "MCP",
        "protocolVersion": settings.MCP_PROTOCOL_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
