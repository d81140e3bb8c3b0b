from __future__ import annotations

import logging
from dataclasses import dataclass

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import StorageError
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncResult:
    employees_pushed: int
    employees_skipped: int
    records_pushed: int
    records_skipped: int


def _record_key(r) -> tuple:
    return (r.employee_id, r.event_kind, r.event_date, r.event_time)


def sync_local_to_remote(
    *,
    local_employees: EmployeeRepository,
    local_records: AttendanceRepository,
    remote_employees: EmployeeRepository,
    remote_records: AttendanceRepository,
) -> SyncResult:
    """Push the local cache into the remote store.

    Employees already known remotely and records already present remotely are
    skipped; rows the remote store rejects are skipped and logged.
    """
    employees_pushed = employees_skipped = 0
    for employee in local_employees.list_all():
        if remote_employees.get_by_employee_id(employee.employee_id) is not None:
            employees_skipped += 1
            continue
        try:
            remote_employees.create(employee)
            employees_pushed += 1
        except StorageError as e:
            logger.info("Employee %s not synced: %s", employee.employee_id, e)
            employees_skipped += 1

    existing = {_record_key(r) for r in remote_records.list_all()}
    records_pushed = records_skipped = 0
    for record in local_records.list_all():
        if _record_key(record) in existing:
            records_skipped += 1
            continue
        try:
            remote_records.append(record)
            existing.add(_record_key(record))
            records_pushed += 1
        except StorageError as e:
            logger.info("Record for %s not synced: %s", record.employee_id, e)
            records_skipped += 1

    result = SyncResult(employees_pushed, employees_skipped, records_pushed, records_skipped)
    logger.info("Sync finished: %s", result)
    return result
