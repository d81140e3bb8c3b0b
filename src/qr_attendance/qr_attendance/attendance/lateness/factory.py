from __future__ import annotations

from dataclasses import dataclass

from .base import LatenessPolicy
from .grace_policy import GraceLatenessPolicy
from .strict_policy import StrictLatenessPolicy


@dataclass
class LatenessPolicyFactory:
    """Factory Pattern: choose the lateness rule from the configured tolerance."""

    def for_tolerance(self, tolerance_minutes: int) -> LatenessPolicy:
        tolerance_minutes = int(tolerance_minutes or 0)
        if tolerance_minutes <= 0:
            return StrictLatenessPolicy()
        return GraceLatenessPolicy(tolerance_minutes=tolerance_minutes)
