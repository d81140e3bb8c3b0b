from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Append-only attendance log."""

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, event_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def append(self, record: AttendanceRecord) -> AttendanceRecord:
        """Persist ``record`` and return it with its store-assigned id."""

        raise NotImplementedError
