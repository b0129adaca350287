"""Notion MCP Gateway HTTP API."""
