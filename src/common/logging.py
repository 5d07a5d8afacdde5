"""Shared logging helpers for the SnowRail MCP adapter."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_LOGGER_CONFIGURED = False


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger if it has not been configured yet.

    Records go to stderr: stdout carries the MCP stdio protocol stream.
    """

    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
    _LOGGER_CONFIGURED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger configured with the shared settings."""

    configure_logging()
    return logging.getLogger(name if name else "snowrail_mcp")


__all__ = ["configure_logging", "get_logger"]
