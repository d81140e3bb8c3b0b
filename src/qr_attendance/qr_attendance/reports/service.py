from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.metrics import count_absences
from ..attendance.repository import AttendanceRepository
from ..attendance.schedule import event_label
from ..common.datetime_utils import (
    format_date_dmy,
    format_date_short,
    format_time_12h,
    now_local,
    to_local_date,
)
from ..core.constants import NO_AREA_LABEL, NO_PHONE_LABEL
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository

ATTENDANCE_HEADER = ["Nombre", "ID Empleado", "Cargo", "Área", "Teléfono", "Tipo de Evento", "Fecha", "Hora"]
EMPLOYEES_HEADER = ["Nombre", "ID Empleado", "Cargo", "Área", "Teléfono", "Días Faltados", "Fecha Registro"]


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    mimetype: str = "text/csv"


def _to_csv_bytes(header: Sequence[str], rows: Iterable[Sequence[object]]) -> bytes:
    """Semicolon separated with a UTF-8 BOM so spreadsheet apps in Spanish locales open it as-is."""
    out = io.StringIO()
    writer = csv.writer(out, delimiter=";", lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return out.getvalue().encode("utf-8-sig")


class ReportExportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock

    def daily_attendance_csv(self, *, today: Optional[date] = None) -> ExportFile:
        today = today or self._clock().date()
        records = list(self._attendance.list_for_date(today))
        if not records:
            raise ValidationError("No hay registros para exportar")

        by_id = {e.employee_id: e for e in self._employees.list_all()}
        records.sort(key=lambda r: (r.employee_name.casefold(), r.event_time))

        rows = []
        for r in records:
            employee = by_id.get(r.employee_id)
            rows.append(
                [
                    r.employee_name,
                    r.employee_id,
                    r.employee_position or "",
                    (employee.area if employee else None) or NO_AREA_LABEL,
                    (employee.phone if employee else None) or NO_PHONE_LABEL,
                    event_label(r.event_kind),
                    format_date_dmy(r.event_date),
                    format_time_12h(r.event_time),
                ]
            )

        return ExportFile(filename=f"Asistencia_{today.isoformat()}.csv", content=_to_csv_bytes(ATTENDANCE_HEADER, rows))

    def employees_csv(self, *, today: Optional[date] = None) -> ExportFile:
        today = today or self._clock().date()
        roster = list(self._employees.list_all())
        if not roster:
            raise ValidationError("No hay empleados para exportar")

        records = self._attendance.list_all()
        rows = [
            [
                e.name,
                e.employee_id,
                e.position,
                e.area or NO_AREA_LABEL,
                e.phone or NO_PHONE_LABEL,
                count_absences(e.employee_id, records, roster=roster, today=today),
                format_date_short(to_local_date(e.created_at)),
            ]
            for e in sorted(roster, key=lambda e: e.name.casefold())
        ]

        return ExportFile(filename=f"Empleados_{today.isoformat()}.csv", content=_to_csv_bytes(EMPLOYEES_HEADER, rows))
