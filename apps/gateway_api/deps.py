"""
FastAPI Dependency Injection.

Shared objects live on app.state and are built once by create_app.
"""

from fastapi import Request

from apps.gateway_api.sessions import SessionRegistry
from gateway_config.settings import Settings
from gateway_tools.dispatcher import ToolDispatcher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_dispatcher(request: Request) -> ToolDispatcher:
    """Dependency: dispatcher bound to the app's registry and Notion client."""
    return request.app.state.dispatcher


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions
