"""MCP stdio server exposing the registered SnowRail tools."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from common.config import AppSettings

from .registry import ToolRegistry, build_registry

LOGGER = logging.getLogger("snowrail_mcp.server")

SERVER_NAME = "snowrail-mcp"


def list_tool_definitions(registry: ToolRegistry) -> List[Tool]:
    """MCP tool metadata for every registered descriptor."""

    return [
        Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema(),
        )
        for descriptor in registry
    ]


async def handle_tool(registry: ToolRegistry, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
    """Run one tool call off the event loop.

    Separated from the decorated ``call_tool`` handler so tests can invoke
    it without the MCP session machinery. Validation, configuration and
    transport errors propagate; the SDK reports them as tool errors.
    """

    return await asyncio.to_thread(registry.invoke, name, arguments or {})


def create_server(registry: ToolRegistry) -> Server:
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return list_tool_definitions(registry)

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        LOGGER.info("Tool call: %s", name)
        return await handle_tool(registry, name, arguments)

    return server


async def run(settings: AppSettings) -> None:
    """Run the MCP server over stdio until the client disconnects."""

    registry = build_registry(settings)
    server = create_server(registry)
    LOGGER.info("SnowRail MCP server starting over stdio (mode=%s)", settings.mcp_mode.value)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


__all__ = ["SERVER_NAME", "create_server", "handle_tool", "list_tool_definitions", "run"]
