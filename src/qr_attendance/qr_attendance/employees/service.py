from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: register, look up and remove employees."""

    def __init__(self, employees: EmployeeRepository, *, clock: Callable[[], datetime] = now_local):
        self._employees = employees
        self._clock = clock

    def register(
        self,
        *,
        name: str,
        employee_id: str,
        position: str,
        area: Optional[str] = None,
        phone: Optional[str] = None,
        dni: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "Nombre")
        employee_id = require_non_empty(employee_id, "ID de empleado")
        position = require_non_empty(position, "Cargo")
        dni = optional_text(dni)

        if self._employees.get_by_employee_id(employee_id):
            raise ValidationError("El ID de empleado ya existe")
        if dni and self._employees.get_by_dni(dni):
            raise ValidationError("El DNI ya está registrado")

        employee = Employee(
            employee_id=employee_id,
            name=name,
            position=position,
            created_at=self._clock(),
            dni=dni,
            area=optional_text(area),
            phone=optional_text(phone),
        )
        self._employees.create(employee)
        logger.info("Employee registered: %s (%s)", employee.employee_id, employee.name)
        return employee

    def delete(self, employee_id: str) -> None:
        """Hard delete. Past attendance records are left untouched."""
        if not self._employees.delete_by_employee_id(employee_id.strip()):
            raise NotFoundError("Empleado no encontrado")
        logger.info("Employee deleted: %s", employee_id)

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_employee_id(employee_id.strip())

    def list_all(self) -> Sequence[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: e.name.casefold())

    def search(self, query: str) -> Sequence[Employee]:
        needle = (query or "").strip().casefold()
        employees = self.list_all()
        if not needle:
            return employees

        def _matches(e: Employee) -> bool:
            fields = (e.name, e.employee_id, e.dni, e.position, e.area)
            return any(needle in f.casefold() for f in fields if f)

        return [e for e in employees if _matches(e)]
