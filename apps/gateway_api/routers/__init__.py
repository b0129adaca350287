"""API Routers."""

from apps.gateway_api.routers import health, metrics, rest, rpc, sse

__all__ = ["health", "metrics", "rest", "rpc", "sse"]
