"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

Deployment:
- Local: .env file (gitignored)
- Hosted: set NOTION_API_KEY and PORT in the service environment
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

KNOWN_TRANSPORTS = ("rest", "sse", "http")


class ConfigurationError(Exception):
    """Required configuration is missing or unusable."""

    pass


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Only NOTION_API_KEY is required; everything else has a default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # NOTION
    # ========================================================================
    NOTION_API_KEY: str = Field(default="", description="Notion integration token")
    NOTION_VERSION: str = Field(default="2022-06-28", description="Notion-Version header")

    # ========================================================================
    # API SERVER
    # ========================================================================
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=10000, ge=1, le=65535)
    API_CORS_ORIGINS: str = Field(default="*")
    EXPOSE_ERROR_STACK: bool = Field(
        default=False, description="Include tracebacks in REST 500 responses"
    )

    # ========================================================================
    # MCP SURFACE
    # ========================================================================
    TRANSPORTS: str = Field(
        default="rest,sse,http",
        description="Enabled transport adapters: rest, sse, http",
    )
    TOOL_CATALOG: str = Field(
        default="full", description="full (6 tools) or core (4 tools)", pattern="^(full|core)$"
    )
    SERVICE_NAME: str = Field(default="notion-mcp-server")
    SERVICE_VERSION: str = Field(default="1.0.0")
    MCP_PROTOCOL_VERSION: str = Field(default="2025-03-26")
    SSE_PING_SECONDS: int = Field(default=15, ge=1)

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    @field_validator("TRANSPORTS")
    @classmethod
    def _check_transports(cls, value: str) -> str:
        names = [name.strip().lower() for name in value.split(",") if name.strip()]
        unknown = [name for name in names if name not in KNOWN_TRANSPORTS]
        if unknown:
            raise ValueError(f"Unknown transport(s): {', '.join(unknown)}")
        return ",".join(names)

    def enabled_transports(self) -> set[str]:
        """Transport adapters to mount."""
        return {name for name in self.TRANSPORTS.split(",") if name}

    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.API_CORS_ORIGINS.split(",") if origin.strip()] or ["*"]

    def require_notion_api_key(self) -> str:
        """Return the Notion token or raise ConfigurationError if unset."""
        if not self.NOTION_API_KEY:
            raise ConfigurationError("NOTION_API_KEY is required")
        return self.NOTION_API_KEY
