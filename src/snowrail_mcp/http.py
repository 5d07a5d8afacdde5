"""HTTP interface for the SnowRail tool runner."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI

from common.config import AppSettings, get_settings

from . import core
from .registry import ToolRegistry, build_registry
from .schemas import ToolCallRequest, ToolSummary


def create_app(settings: Optional[AppSettings] = None, registry: Optional[ToolRegistry] = None) -> FastAPI:
    """Build the FastAPI app around a registry built once at startup."""

    if registry is None:
        registry = build_registry(settings or get_settings())

    app = FastAPI(title="SnowRail MCP", version="1.0.0")
    app.state.registry = registry

    @app.get("/tools", response_model=List[ToolSummary])
    async def list_tools() -> List[ToolSummary]:
        return [
            ToolSummary(
                name=descriptor.name,
                tier=descriptor.tier.value,
                description=descriptor.description,
                input_schema=descriptor.input_schema(),
            )
            for descriptor in registry
        ]

    @app.post("/call_tool")
    def call_tool(payload: ToolCallRequest) -> Dict[str, Any]:
        """Invoke a registered tool via the core runner."""
        return core.run_tool(registry, payload.tool, payload.arguments)

    return app


__all__ = ["create_app"]
