"""Read-only diagnostics and status tools."""
from __future__ import annotations

from ..bridge import RequestSpec
from ..modes import Tier
from ..schemas import ToolArguments
from . import catalog_tool


@catalog_tool(
    "snowrail_health",
    tier=Tier.CORE,
    arguments=ToolArguments,
    description="Check SnowRail API health (GET /health).",
)
def health(args: ToolArguments) -> RequestSpec:
    return args.request("/health")


@catalog_tool(
    "snowrail_agent_identity",
    tier=Tier.CORE,
    arguments=ToolArguments,
    description="Fetch the SnowRail agent identity (GET /api/agent/identity).",
)
def agent_identity(args: ToolArguments) -> RequestSpec:
    return args.request("/api/agent/identity")


@catalog_tool(
    "snowrail_agent_stats",
    tier=Tier.CORE,
    arguments=ToolArguments,
    description="Fetch SnowRail agent statistics (GET /api/agent/stats).",
)
def agent_stats(args: ToolArguments) -> RequestSpec:
    return args.request("/api/agent/stats")


@catalog_tool(
    "snowrail_agent_activity",
    tier=Tier.CORE,
    arguments=ToolArguments,
    description="Fetch recent SnowRail agent activity (GET /api/agent/activity).",
)
def agent_activity(args: ToolArguments) -> RequestSpec:
    return args.request("/api/agent/activity")


@catalog_tool(
    "snowrail_treasury_balance",
    tier=Tier.CORE,
    arguments=ToolArguments,
    description="Fetch the treasury balance (GET /api/treasury/balance).",
)
def treasury_balance(args: ToolArguments) -> RequestSpec:
    return args.request("/api/treasury/balance")


@catalog_tool(
    "snowrail_facilitator_health",
    tier=Tier.CORE,
    arguments=ToolArguments,
    description="Check x402 facilitator health (GET /facilitator/health).",
)
def facilitator_health(args: ToolArguments) -> RequestSpec:
    return args.request("/facilitator/health")


__all__ = [
    "agent_activity",
    "agent_identity",
    "agent_stats",
    "facilitator_health",
    "health",
    "treasury_balance",
]
