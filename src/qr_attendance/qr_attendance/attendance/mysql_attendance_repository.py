from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Sequence

from ..core.enums import EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    from_db_datetime,
    normalize_mysql_time,
    to_db_datetime,
)
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = (
    "record_id, employee_id, employee_name, employee_position, "
    "event_type, event_date, event_time, created_at"
)


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        employee_id=r["employee_id"],
        employee_name=r.get("employee_name") or "Desconocido",
        employee_position=r.get("employee_position") or "N/A",
        event_kind=EventKind(r["event_type"]),
        event_date=r["event_date"],
        event_time=normalize_mysql_time(r["event_time"]),
        created_at=from_db_datetime(r["created_at"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                ORDER BY event_date DESC, event_time DESC
                """
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date(self, event_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE event_date=%s
                ORDER BY event_time DESC
                """,
                (event_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def append(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, employee_name, employee_position,
                    event_type, event_date, event_time, created_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.employee_id,
                    record.employee_name,
                    record.employee_position,
                    record.event_kind.value,
                    record.event_date,
                    record.event_time,
                    to_db_datetime(record.created_at),
                ),
            )
            return replace(record, record_id=int(cur.lastrowid))
