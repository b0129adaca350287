"""
Notion MCP Gateway Applications Package.

Contains:
- gateway_api: FastAPI application (REST, SSE and JSON-RPC transports)
"""

__version__ = "1.0.0"
