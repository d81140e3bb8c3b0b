from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_date_dmy, format_time_12h, now_local
from ..core.constants import NO_RECORDS_LABEL
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .lateness.base import LatenessPolicy
from .lateness.strict_policy import StrictLatenessPolicy
from .metrics import count_absences, count_lateness, entry_dates
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schedule import classify_event, event_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    total_employees: int
    present_today: int
    records_today: int
    last_activity: Optional[time]


@dataclass(frozen=True)
class EmployeeProfile:
    employee: Employee
    absence_days: int
    lateness_count: int
    attended_days: int
    total_records: int
    last_record: Optional[AttendanceRecord]


@dataclass(frozen=True)
class EmployeeOverviewRow:
    employee: Employee
    lateness_count: int
    absence_days: int


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        lateness_policy: Optional[LatenessPolicy] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._policy = lateness_policy or StrictLatenessPolicy()
        self._clock = clock

    def _today(self, today: Optional[date]) -> date:
        return today or self._clock().date()

    def record_attendance(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        """Register a scan for ``employee_id`` at ``now`` (defaults to the kiosk clock)."""
        employee_id = (employee_id or "").strip()
        if not employee_id:
            raise ValidationError("Ingresa un ID de empleado")

        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise NotFoundError("Empleado no encontrado")

        now = now or self._clock()
        record = AttendanceRecord(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            employee_position=employee.position,
            event_kind=classify_event(now.time()),
            event_date=now.date(),
            event_time=now.time().replace(microsecond=0),
            created_at=now,
        )
        stored = self._attendance.append(record)
        logger.info(
            "Attendance %s recorded for %s at %s",
            stored.event_kind.value, stored.employee_id, stored.event_time.isoformat(),
        )
        return stored

    def today_records(self, *, today: Optional[date] = None) -> list[AttendanceRecord]:
        """Today's records, most recent first."""
        records = self._attendance.list_for_date(self._today(today))
        return sorted(records, key=lambda r: r.event_time, reverse=True)

    def dashboard_summary(self, *, today: Optional[date] = None) -> DashboardSummary:
        records = self.today_records(today=today)
        return DashboardSummary(
            total_employees=len(self._employees.list_all()),
            present_today=len({r.employee_id for r in records}),
            records_today=len(records),
            last_activity=records[0].event_time if records else None,
        )

    def employee_profile(self, employee_id: str, *, today: Optional[date] = None) -> EmployeeProfile:
        employee_id = employee_id.strip()
        employee = self._employees.get_by_employee_id(employee_id)
        if employee is None:
            raise NotFoundError("Empleado no encontrado")
        roster = list(self._employees.list_all())
        if all(e.employee_id != employee_id for e in roster):
            roster.append(employee)

        today = self._today(today)
        records = self._attendance.list_all()
        own = [r for r in records if r.employee_id == employee_id]
        last = max(own, key=lambda r: (r.event_date, r.event_time), default=None)

        return EmployeeProfile(
            employee=employee,
            absence_days=count_absences(employee_id, records, roster=roster, today=today),
            lateness_count=count_lateness(employee_id, records, roster=roster, policy=self._policy),
            attended_days=len(entry_dates(employee_id, own)),
            total_records=len(own),
            last_record=last,
        )

    def employees_overview(
        self, employees: Sequence[Employee], *, today: Optional[date] = None
    ) -> list[EmployeeOverviewRow]:
        """Lateness and absence counts for each of ``employees``."""
        today = self._today(today)
        roster = self._employees.list_all()
        records = self._attendance.list_all()
        return [
            EmployeeOverviewRow(
                employee=e,
                lateness_count=count_lateness(e.employee_id, records, roster=roster, policy=self._policy),
                absence_days=count_absences(e.employee_id, records, roster=roster, today=today),
            )
            for e in employees
        ]

    @staticmethod
    def to_ui(r: AttendanceRecord) -> dict:
        return {
            "record_id": r.record_id,
            "employee_id": r.employee_id,
            "employee_name": r.employee_name,
            "employee_position": r.employee_position,
            "event_type": r.event_kind.value,
            "event_label": event_label(r.event_kind),
            "event_date": r.event_date.isoformat(),
            "event_time": r.event_time.strftime("%H:%M:%S"),
            "date_display": format_date_dmy(r.event_date),
            "time_display": format_time_12h(r.event_time),
        }

    @staticmethod
    def last_record_label(r: Optional[AttendanceRecord]) -> str:
        if r is None:
            return NO_RECORDS_LABEL
        return f"{format_date_dmy(r.event_date)} - {format_time_12h(r.event_time)}"
