"""Tool registry for the SnowRail MCP adapter."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Type

from pydantic import ValidationError

from common.config import AppSettings

from .bridge import RequestBridge, RequestSpec
from .errors import DuplicateToolError, ToolNotFoundError, ToolValidationError
from .formatting import ToolOutput, format_result
from .modes import ModeGate, Tier
from .schemas import ToolArguments

LOGGER = logging.getLogger("snowrail_mcp.registry")

RequestBuilder = Callable[[Any], RequestSpec]


@dataclass(frozen=True)
class ToolDescriptor:
    """A named tool: its tier, argument model and request builder."""

    name: str
    description: str
    tier: Tier
    arguments_model: Type[ToolArguments]
    build_request: RequestBuilder

    def input_schema(self) -> Dict[str, Any]:
        return self.arguments_model.model_json_schema(by_alias=True)

    def validate(self, arguments: Optional[Mapping[str, Any]]) -> ToolArguments:
        try:
            return self.arguments_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            fields = [
                {
                    "field": ".".join(str(part) for part in error["loc"]) or "<arguments>",
                    "message": error["msg"],
                }
                for error in exc.errors()
            ]
            raise ToolValidationError(self.name, fields) from exc

    def invoke(self, arguments: Optional[Mapping[str, Any]], bridge: RequestBridge) -> ToolOutput:
        validated = self.validate(arguments)
        envelope = bridge.execute(self.build_request(validated))
        return format_result(envelope)


TOOL_CATALOG: List[ToolDescriptor] = []


def catalog_tool(
    name: str,
    *,
    tier: Tier,
    arguments: Type[ToolArguments],
    description: str,
) -> Callable[[RequestBuilder], RequestBuilder]:
    """Add the decorated request builder to the static tool catalog."""

    def decorator(func: RequestBuilder) -> RequestBuilder:
        if any(entry.name == name for entry in TOOL_CATALOG):
            raise DuplicateToolError(f"Tool already declared: {name}")
        TOOL_CATALOG.append(
            ToolDescriptor(
                name=name,
                description=description,
                tier=tier,
                arguments_model=arguments,
                build_request=func,
            )
        )
        return func

    return decorator


class ToolRegistry:
    """The set of tools exposed by one server process."""

    def __init__(self, bridge: RequestBridge) -> None:
        self.bridge = bridge
        self._tools: Dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {descriptor.name}")
        self._tools[descriptor.name] = descriptor

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(f"Unknown tool: {name}") from None

    def names(self) -> List[str]:
        return list(self._tools)

    def descriptors(self) -> List[ToolDescriptor]:
        return list(self._tools.values())

    def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolOutput:
        return self.get(name).invoke(arguments, self.bridge)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(
    settings: AppSettings,
    bridge: Optional[RequestBridge] = None,
    catalog: Optional[Iterable[ToolDescriptor]] = None,
) -> ToolRegistry:
    """Register every catalog entry whose tier the configured mode enables."""

    if catalog is None:
        from .tools import ensure_tools_registered

        ensure_tools_registered()
        catalog = TOOL_CATALOG

    gate = ModeGate.from_mode(settings.mcp_mode)
    registry = ToolRegistry(bridge or RequestBridge(settings))
    for descriptor in catalog:
        if gate.allows(descriptor.tier):
            registry.register(descriptor)

    LOGGER.info("Registered %d tools for mode %s", len(registry), gate.mode.value)
    return registry


__all__ = [
    "TOOL_CATALOG",
    "ToolDescriptor",
    "ToolRegistry",
    "build_registry",
    "catalog_tool",
]
