"""Tool declarations for the SnowRail MCP adapter.

Each module in this package adds its tools to the static catalog through
:func:`snowrail_mcp.registry.catalog_tool`; importing the modules is what
populates the catalog.
"""
from __future__ import annotations

import pkgutil
from importlib import import_module
from typing import List

from ..registry import catalog_tool

__all__ = ["catalog_tool", "ensure_tools_registered", "tool_module_names"]

_loaded = False


def tool_module_names() -> List[str]:
    """Public tool modules in this package, in a stable order."""
    return sorted(
        info.name
        for info in pkgutil.iter_modules(__path__)
        if not info.ispkg and not info.name.startswith("_")
    )


def ensure_tools_registered() -> None:
    """Import the tool modules once; later calls are no-ops."""
    global _loaded
    if _loaded:
        return
    for name in tool_module_names():
        import_module(f"{__name__}.{name}")
    _loaded = True
