"""Remote store with a local cache behind one repository facade.

Writes land in the local cache first and are then mirrored to the remote store.
Reads prefer the remote store and fall back to the cache when it fails;
employees only held by the cache are listed after the remote roster.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Sequence, TypeVar

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.exceptions import StorageError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read(remote, local, op: str, call: Callable[[object], T]) -> T:
    if remote is not None:
        try:
            return call(remote)
        except StorageError as e:
            logger.warning("Remote %s failed, using local cache: %s", op, e)
    return call(local)


def _mirror(remote, op: str, call: Callable[[object], T]) -> Optional[T]:
    if remote is None:
        return None
    try:
        return call(remote)
    except StorageError as e:
        logger.warning("Remote %s failed, kept in local cache only: %s", op, e)
        return None


class FallbackEmployeeRepository(EmployeeRepository):
    def __init__(self, local: EmployeeRepository, remote: Optional[EmployeeRepository] = None):
        self._local = local
        self._remote = remote

    def list_all(self) -> Sequence[Employee]:
        if self._remote is None:
            return self._local.list_all()
        try:
            remote = list(self._remote.list_all())
        except StorageError as e:
            logger.warning("Remote list employees failed, using local cache: %s", e)
            return self._local.list_all()
        try:
            local = self._local.list_all()
        except StorageError as e:
            logger.warning("Local cache unreadable, listing remote employees only: %s", e)
            return remote
        known = {e.employee_id for e in remote}
        # Registered while the remote store was down and not synced yet.
        return remote + [e for e in local if e.employee_id not in known]

    def _lookup(self, op: str, call: Callable[[EmployeeRepository], Optional[Employee]]) -> Optional[Employee]:
        found = _read(self._remote, self._local, op, call)
        if found is None and self._remote is not None:
            # May have been registered while the remote store was down.
            found = call(self._local)
        return found

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return self._lookup("employee lookup", lambda repo: repo.get_by_employee_id(employee_id))

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        return self._lookup("dni lookup", lambda repo: repo.get_by_dni(dni))

    def create(self, employee: Employee) -> None:
        self._local.create(employee)
        _mirror(self._remote, "employee insert", lambda repo: repo.create(employee))

    def delete_by_employee_id(self, employee_id: str) -> bool:
        deleted = self._local.delete_by_employee_id(employee_id)
        remote_deleted = _mirror(self._remote, "employee delete", lambda repo: repo.delete_by_employee_id(employee_id))
        return bool(deleted or remote_deleted)


class FallbackAttendanceRepository(AttendanceRepository):
    def __init__(self, local: AttendanceRepository, remote: Optional[AttendanceRepository] = None):
        self._local = local
        self._remote = remote

    def list_all(self) -> Sequence[AttendanceRecord]:
        return _read(self._remote, self._local, "list attendance", lambda repo: repo.list_all())

    def list_for_date(self, event_date: date) -> Sequence[AttendanceRecord]:
        return _read(self._remote, self._local, "list attendance by date", lambda repo: repo.list_for_date(event_date))

    def append(self, record: AttendanceRecord) -> AttendanceRecord:
        stored = self._local.append(record)
        mirrored = _mirror(self._remote, "attendance insert", lambda repo: repo.append(record))
        return mirrored if mirrored is not None else stored
