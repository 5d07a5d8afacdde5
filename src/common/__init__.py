"""Shared helpers for the SnowRail MCP adapter."""

from .config import (
    AppSettings,
    Environment,
    Mode,
    get_settings,
    reset_settings_cache,
)
from .logging import configure_logging, get_logger

__all__ = [
    "AppSettings",
    "Environment",
    "Mode",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_settings_cache",
]
