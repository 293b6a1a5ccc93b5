"""
keystone-auth Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from KEYSTONE_* environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="KEYSTONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Identity service
    auth_url: str = Field(
        default="https://identity.api.rackspacecloud.com/v2.0/",
        description="Keystone v2 endpoint the credentials are issued for",
    )
    username: str = Field(
        default="",
        description="Cloud account username",
    )
    api_key: str = Field(
        default="",
        description="API key for the cloud account",
    )

    @field_validator("username", "api_key", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str | None) -> str:
        """Treat whitespace-only values as unset."""
        return (v or "").strip()

    @property
    def has_credentials(self) -> bool:
        """Check if both username and API key are configured."""
        return bool(self.username and self.api_key)


def get_settings(env_file: str | Path | None = ".env") -> Settings:
    """
    Get validated settings instance.

    Args:
        env_file: dotenv file read in addition to the environment.

    Raises:
        ValidationError: If settings are present but invalid.
    """
    return Settings(_env_file=env_file)
