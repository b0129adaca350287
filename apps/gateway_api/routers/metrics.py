"""
Prometheus Metrics Endpoint.

Exposes /metrics for Prometheus scraping.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    """
    Prometheus metrics endpoint.

    Includes tool_calls_total, tool_call_duration_seconds and
    sse_sessions_active from gateway_obs.metrics.
    """
    return PlainTextResponse(generate_latest(), media_type=CONTENT_TYPE_LATEST)
