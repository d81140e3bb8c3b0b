"""Per-employee metrics computed from a snapshot of the attendance log.

Every function here is pure: the roster and the records are read, never
mutated, and the same snapshot always yields the same numbers.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import to_local_date
from ..core.enums import EventKind
from ..employees.model import Employee
from .lateness.base import LatenessPolicy
from .lateness.strict_policy import StrictLatenessPolicy
from .model import AttendanceRecord


def find_employee(roster: Iterable[Employee], employee_id: str) -> Optional[Employee]:
    for employee in roster:
        if employee.employee_id == employee_id:
            return employee
    return None


def entry_records(employee_id: str, records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    return [
        r for r in records
        if r.employee_id == employee_id and r.event_kind == EventKind.ENTRADA
    ]


def entry_dates(employee_id: str, records: Iterable[AttendanceRecord]) -> set[date]:
    return {r.event_date for r in entry_records(employee_id, records)}


def count_lateness(
    employee_id: str,
    records: Sequence[AttendanceRecord],
    *,
    roster: Sequence[Employee],
    policy: Optional[LatenessPolicy] = None,
) -> int:
    """Number of entries recorded after the scheduled start."""
    if find_employee(roster, employee_id) is None:
        return 0

    policy = policy or StrictLatenessPolicy()
    return sum(1 for r in entry_records(employee_id, records) if policy.is_late(r.event_time))


def absence_days_between(start: date, today: date, attended: set[date]) -> int:
    """Weekdays in [start, today] without an entry, ``today`` excluded."""
    absences = 0
    current = start
    while current <= today:
        # weekday(): 5 = Saturday, 6 = Sunday
        if current.weekday() < 5 and current != today and current not in attended:
            absences += 1
        current += timedelta(days=1)
    return absences


def count_absences(
    employee_id: str,
    records: Sequence[AttendanceRecord],
    *,
    roster: Sequence[Employee],
    today: date,
) -> int:
    """Working days (Mon-Fri) since registration with no entry record."""
    employee = find_employee(roster, employee_id)
    if employee is None:
        return 0

    created_on = to_local_date(employee.created_at)
    return absence_days_between(created_on, today, entry_dates(employee_id, records))
