from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import EventKind


@dataclass(frozen=True)
class AttendanceRecord:
    """Entidad de dominio: un evento de asistencia.

    El nombre y el cargo son una copia tomada al registrar; cambios posteriores
    del empleado no alteran registros pasados.
    """

    employee_id: str
    employee_name: str
    employee_position: str
    event_kind: EventKind
    event_date: date
    event_time: time
    created_at: datetime
    record_id: Optional[int] = None
