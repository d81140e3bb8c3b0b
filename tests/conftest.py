from __future__ import annotations

from datetime import datetime

import pytest

from src.qr_attendance.qr_attendance.employees.model import Employee
from tests.fakes import InMemoryAttendance, InMemoryEmployees


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def make_employee():
    def _make(employee_id="EMP001", name="Ana Quispe", position="Analista", created_at=None, **kwargs):
        return Employee(
            employee_id=employee_id,
            name=name,
            position=position,
            created_at=created_at or datetime(2026, 1, 5, 9, 0),
            **kwargs,
        )

    return _make
