"""Exception types raised by the SnowRail MCP adapter."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class ConfigurationError(RuntimeError):
    """Raised when no API base URL can be resolved for a call."""


class TransportError(RuntimeError):
    """Raised when the outbound HTTP call fails below the HTTP layer."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ToolNotFoundError(LookupError):
    """Raised when a requested tool is not present in the registry."""


class DuplicateToolError(ValueError):
    """Raised when two tools are registered under the same name."""


class ToolValidationError(ValueError):
    """Raised when tool arguments do not satisfy the declared input schema.

    ``fields`` holds one entry per offending argument with its location and
    the validation message, in the order pydantic reported them.
    """

    def __init__(self, tool_name: str, fields: List[Dict[str, Any]]) -> None:
        self.tool_name = tool_name
        self.fields = fields
        names = ", ".join(entry["field"] for entry in fields) or "<arguments>"
        super().__init__(f"Invalid arguments for {tool_name}: {names}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "ValidationError",
            "message": str(self),
            "fields": self.fields,
        }


__all__ = [
    "ConfigurationError",
    "DuplicateToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "TransportError",
]
