"""Mode gate deciding which tool tiers are registered."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from common.config import Mode


class Tier(str, Enum):
    CORE = "core"
    ADVANCED = "advanced"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ModeGate:
    """Tier membership computed once from the configured mode."""

    mode: Mode
    is_core: bool
    is_advanced: bool
    is_internal: bool

    @classmethod
    def from_mode(cls, mode: Mode) -> "ModeGate":
        mode = Mode(mode)
        return cls(
            mode=mode,
            is_core=True,
            is_advanced=mode in (Mode.ADVANCED, Mode.INTERNAL),
            is_internal=mode is Mode.INTERNAL,
        )

    def enabled_tiers(self) -> FrozenSet[Tier]:
        tiers = {Tier.CORE}
        if self.is_advanced:
            tiers.add(Tier.ADVANCED)
        if self.is_internal:
            tiers.add(Tier.INTERNAL)
        return frozenset(tiers)

    def allows(self, tier: Tier) -> bool:
        return tier in self.enabled_tiers()


__all__ = ["Mode", "ModeGate", "Tier"]
