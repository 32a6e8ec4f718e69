"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Uvicorn bind address and CORS configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from grammar_fixer.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Uvicorn and CORS configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    # Comma-separated origins, or "*" for allow-all
    cors_origins: str = Field(default="*", description="Allowed CORS origins")

    def cors_origins_list(self) -> list[str]:
        if not self.cors_origins or self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
