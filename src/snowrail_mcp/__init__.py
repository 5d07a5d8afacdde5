"""SnowRail MCP adapter package initialization."""
from . import core, tools
from .core import run_tool
from .registry import TOOL_CATALOG, ToolRegistry, build_registry, catalog_tool

# Ensure all tool modules are imported so that the catalog is populated.
tools.ensure_tools_registered()

__version__ = "1.0.0"

__all__ = [
    "TOOL_CATALOG",
    "ToolRegistry",
    "build_registry",
    "catalog_tool",
    "run_tool",
]
