from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Entidad de dominio: Empleado.

    Nota: objeto de datos puro (sin código de acceso a la BD).
    """

    employee_id: str
    name: str
    position: str
    created_at: datetime
    dni: Optional[str] = None
    area: Optional[str] = None
    phone: Optional[str] = None
    active: bool = True
