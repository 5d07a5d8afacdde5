"""Presentation of tool results as MCP content."""
from __future__ import annotations

import json
from typing import Any, List

from mcp.types import TextContent

from .bridge import ResponseEnvelope

ToolOutput = List[TextContent]


def format_result(payload: Any) -> ToolOutput:
    """Wrap ``payload`` as a single indented JSON text block."""

    if isinstance(payload, ResponseEnvelope):
        payload = payload.to_dict()
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


def output_to_dicts(output: ToolOutput) -> List[dict]:
    """Plain-dict form of a tool output for JSON transports."""

    return [block.model_dump(exclude_none=True) for block in output]


__all__ = ["ToolOutput", "format_result", "output_to_dicts"]
