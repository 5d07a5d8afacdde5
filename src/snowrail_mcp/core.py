"""Core execution helpers for SnowRail MCP tools."""
from __future__ import annotations

import logging
from typing import Any, Dict

from .errors import ConfigurationError, ToolNotFoundError, ToolValidationError, TransportError
from .formatting import output_to_dicts
from .registry import ToolRegistry

LOGGER = logging.getLogger("snowrail_mcp.core")

ToolResponse = Dict[str, Any]


def _error(tool_name: str, error_type: str, message: str) -> ToolResponse:
    return {
        "status": "error",
        "tool": tool_name,
        "error": {
            "type": error_type,
            "message": message,
        },
    }


def run_tool(registry: ToolRegistry, tool_name: str, parameters: Dict[str, Any] | None = None) -> ToolResponse:
    """Execute a tool from the registry and return a HTTP-style response.

    Backend HTTP errors are successful executions here: the backend status
    and body travel inside ``result``. Only adapter-level failures produce
    ``"status": "error"``.
    """

    parameters = parameters or {}

    try:
        output = registry.invoke(tool_name, parameters)
    except ToolNotFoundError as exc:
        return _error(tool_name, "ToolNotFound", str(exc))
    except ToolValidationError as exc:
        LOGGER.warning("Rejected %s call: %s", tool_name, exc)
        return {"status": "error", "tool": tool_name, "error": exc.to_dict()}
    except ConfigurationError as exc:
        LOGGER.error("Configuration error in %s: %s", tool_name, exc)
        return _error(tool_name, "ConfigurationError", str(exc))
    except TransportError as exc:
        LOGGER.error("Transport error in %s: %s", tool_name, exc)
        return _error(tool_name, "TransportError", str(exc))

    return {
        "status": "success",
        "tool": tool_name,
        "result": {"content": output_to_dicts(output)},
    }


__all__ = ["ToolResponse", "run_tool"]
