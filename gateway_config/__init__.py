"""
Gateway Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from gateway_config.settings import ConfigurationError, Settings

__all__ = ["ConfigurationError", "Settings"]
