from __future__ import annotations

from datetime import time

from ...common.datetime_utils import minutes_since_midnight
from ...core.constants import SCHEDULED_START_MINUTES
from .base import LatenessPolicy


class StrictLatenessPolicy(LatenessPolicy):
    """Late as soon as the entry minute is past 08:00. 08:00 itself is on time."""

    def is_late(self, entry_time: time) -> bool:
        return minutes_since_midnight(entry_time) > SCHEDULED_START_MINUTES
