"""Application configuration management using Pydantic settings."""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Named SnowRail deployments a tool call can target."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Mode(str, Enum):
    """Operating mode selecting which tool tiers are exposed."""

    CORE = "core"
    ADVANCED = "advanced"
    INTERNAL = "internal"


class AppSettings(BaseSettings):
    """Top-level application settings container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SNOWRAIL_",
        extra="ignore",
        frozen=True,
    )

    mcp_mode: Mode = Field(
        default=Mode.CORE,
        description="Tool tier selector: core, advanced or internal.",
    )
    env: Environment = Field(
        default=Environment.STAGING,
        description="Environment used when a tool call does not name one.",
    )
    api_base: Optional[str] = Field(
        default=None,
        description="Explicit API base URL overriding the environment table.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level.",
    )

    @field_validator("mcp_mode", "env", mode="before")
    @classmethod
    def _normalize_choice(cls, value: object) -> object:
        """Accept choices regardless of case or surrounding whitespace."""

        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("api_base", mode="before")
    @classmethod
    def _blank_as_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> AppSettings:
    """Return the cached application settings instance."""

    return AppSettings()


def reset_settings_cache() -> None:
    """Clear the cached settings so future calls reflect new environment values."""

    get_settings.cache_clear()


__all__ = [
    "AppSettings",
    "Environment",
    "Mode",
    "get_settings",
    "reset_settings_cache",
]
