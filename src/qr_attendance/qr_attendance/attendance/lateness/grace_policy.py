from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ...common.datetime_utils import minutes_since_midnight
from ...core.constants import SCHEDULED_START_MINUTES
from .base import LatenessPolicy


@dataclass(frozen=True)
class GraceLatenessPolicy(LatenessPolicy):
    """Late only after 08:00 plus ``tolerance_minutes``."""

    tolerance_minutes: int

    def is_late(self, entry_time: time) -> bool:
        return minutes_since_midnight(entry_time) > SCHEDULED_START_MINUTES + self.tolerance_minutes
