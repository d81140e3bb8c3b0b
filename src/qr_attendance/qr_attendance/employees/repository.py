from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Interfaz del repositorio de empleados.

    Nota (DIP): los servicios dependen de esta interfaz, no de un almacén concreto.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        raise NotImplementedError

    def delete_by_employee_id(self, employee_id: str) -> bool:
        raise NotImplementedError
