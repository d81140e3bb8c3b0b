from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, dni, position, area, phone, created_at, active"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=row["employee_id"],
        name=row["name"],
        position=row["position"],
        created_at=from_db_datetime(row["created_at"]),
        dni=row.get("dni"),
        area=row.get("area"),
        phone=row.get("phone"),
        active=bool(row.get("active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE dni=%s", (dni,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, dni, position, area, phone, created_at, active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    employee.dni,
                    employee.position,
                    employee.area,
                    employee.phone,
                    to_db_datetime(employee.created_at),
                    int(employee.active),
                ),
            )

    def delete_by_employee_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
