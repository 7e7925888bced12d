from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import RegenerationPolicy
from .policies.base import RegenerationStrategy
from .policies.overwrite_policy import OverwriteStrategy
from .policies.strict_policy import StrictStrategy


@dataclass
class RegenerationStrategyFactory:
    """Factory Pattern: choose the regeneration strategy from configuration."""

    def for_policy(self, policy: RegenerationPolicy | str) -> RegenerationStrategy:
        try:
            policy = RegenerationPolicy(str(getattr(policy, "value", policy)).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown regeneration policy: {policy!r}")

        if policy == RegenerationPolicy.OVERWRITE:
            return OverwriteStrategy()
        return StrictStrategy()
