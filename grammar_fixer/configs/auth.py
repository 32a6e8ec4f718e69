"""
Authentication configuration settings.

Caller identity is resolved upstream (auth proxy or session middleware)
and forwarded in a request header. This service only reads it.

Dependencies: pydantic, pydantic_settings
System role: Identity propagation configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from grammar_fixer.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Identity header configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    identity_header: str = Field(
        default="X-User-Id",
        description="Request header carrying the upstream-resolved user id",
    )
