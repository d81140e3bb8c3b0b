from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import time


class LatenessPolicy(ABC):
    """Strategy Pattern: decide whether an entry time counts as late."""

    @abstractmethod
    def is_late(self, entry_time: time) -> bool:
        raise NotImplementedError
