from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.lateness.factory import LatenessPolicyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import ReportExportService
from .storage.fallback import FallbackAttendanceRepository, FallbackEmployeeRepository
from .storage.json_store import JsonAttendanceRepository, JsonEmployeeRepository, JsonFileStore


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: ReportExportService

    local_employees_repo: Optional[EmployeeRepository] = None
    local_attendance_repo: Optional[AttendanceRepository] = None
    remote_employees_repo: Optional[EmployeeRepository] = None
    remote_attendance_repo: Optional[AttendanceRepository] = None


def build_services(
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    *,
    late_tolerance_minutes: int = 0,
    **repos,
) -> Container:
    policy = LatenessPolicyFactory().for_tolerance(late_tolerance_minutes)
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo, lateness_policy=policy),
        report_service=ReportExportService(attendance_repo, employees_repo),
        **repos,
    )


def build_container(
    *,
    db_config: dict,
    local_store_path: str | Path,
    use_remote_db: bool = True,
    late_tolerance_minutes: int = 0,
) -> Container:
    store = JsonFileStore(local_store_path)
    local_employees = JsonEmployeeRepository(store)
    local_attendance = JsonAttendanceRepository(store)

    remote_employees = remote_attendance = None
    if use_remote_db:
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        remote_employees = MySQLEmployeeRepository(conn)
        remote_attendance = MySQLAttendanceRepository(conn)

    return build_services(
        FallbackEmployeeRepository(local_employees, remote_employees),
        FallbackAttendanceRepository(local_attendance, remote_attendance),
        late_tolerance_minutes=late_tolerance_minutes,
        local_employees_repo=local_employees,
        local_attendance_repo=local_attendance,
        remote_employees_repo=remote_employees,
        remote_attendance_repo=remote_attendance,
    )
