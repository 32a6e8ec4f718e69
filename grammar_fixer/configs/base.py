"""
Shared configuration settings.

Every settings section inherits from this class, so each one reads the
same `.env` file and accepts the application-wide fields below.

Dependencies: pydantic_settings
System role: Common parent of the grammar fixer settings sections
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Application-wide settings shared by all sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported in startup logs",
    )
    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode (tracebacks in 500 responses)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
