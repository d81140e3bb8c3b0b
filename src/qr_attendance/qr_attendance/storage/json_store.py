"""Local JSON file cache for employees and attendance records.

Used as the fallback store when the remote database is unreachable, and as the
only store when no remote database is configured.
"""
from __future__ import annotations

import json
import threading
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_event_time, parse_iso_date
from ..core.enums import EventKind
from ..core.exceptions import StorageError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository


def employee_to_dict(e: Employee) -> dict[str, Any]:
    return {
        "employee_id": e.employee_id,
        "name": e.name,
        "dni": e.dni,
        "position": e.position,
        "area": e.area,
        "phone": e.phone,
        "created_at": e.created_at.isoformat(),
        "active": e.active,
    }


def employee_from_dict(d: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=d["employee_id"],
        name=d["name"],
        position=d.get("position") or "",
        created_at=datetime.fromisoformat(d["created_at"]),
        dni=d.get("dni"),
        area=d.get("area"),
        phone=d.get("phone"),
        active=bool(d.get("active", True)),
    )


def record_to_dict(r: AttendanceRecord) -> dict[str, Any]:
    return {
        "record_id": r.record_id,
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "employee_position": r.employee_position,
        "event_type": r.event_kind.value,
        "event_date": r.event_date.isoformat(),
        "event_time": r.event_time.strftime("%H:%M:%S"),
        "created_at": r.created_at.isoformat(),
    }


def record_from_dict(d: dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=d.get("record_id"),
        employee_id=d["employee_id"],
        employee_name=d.get("employee_name") or "Desconocido",
        employee_position=d.get("employee_position") or "N/A",
        event_kind=EventKind(d["event_type"]),
        event_date=parse_iso_date(d["event_date"]),
        event_time=parse_event_time(d["event_time"]),
        created_at=datetime.fromisoformat(d["created_at"]),
    )


class JsonFileStore:
    """One JSON document ``{"employees": [...], "records": [...]}`` on disk."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def load(self) -> dict[str, list]:
        with self._lock:
            if not self._path.exists():
                return {"employees": [], "records": []}
            try:
                data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
            except (OSError, ValueError) as e:
                raise StorageError(f"No se pudo leer {self._path}: {e}") from e
            if not isinstance(data, dict):
                raise StorageError(f"Formato inválido en {self._path}")
            data.setdefault("employees", [])
            data.setdefault("records", [])
            return data

    def save(self, data: dict[str, list]) -> None:
        with self._lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                tmp = self._path.with_suffix(self._path.suffix + ".tmp")
                tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
                tmp.replace(self._path)
            except OSError as e:
                raise StorageError(f"No se pudo escribir {self._path}: {e}") from e


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, store: JsonFileStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return [employee_from_dict(d) for d in self._store.load()["employees"]]

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.list_all() if e.employee_id == employee_id), None)

    def get_by_dni(self, dni: str) -> Optional[Employee]:
        return next((e for e in self.list_all() if e.dni and e.dni == dni), None)

    def create(self, employee: Employee) -> None:
        with self._store.lock:
            data = self._store.load()
            if any(d["employee_id"] == employee.employee_id for d in data["employees"]):
                raise StorageError(f"Empleado duplicado: {employee.employee_id}")
            data["employees"].append(employee_to_dict(employee))
            self._store.save(data)

    def delete_by_employee_id(self, employee_id: str) -> bool:
        with self._store.lock:
            data = self._store.load()
            kept = [d for d in data["employees"] if d["employee_id"] != employee_id]
            if len(kept) == len(data["employees"]):
                return False
            data["employees"] = kept
            self._store.save(data)
            return True


class JsonAttendanceRepository(AttendanceRepository):
    def __init__(self, store: JsonFileStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [record_from_dict(d) for d in self._store.load()["records"]]

    def list_for_date(self, event_date: date) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if r.event_date == event_date]

    def append(self, record: AttendanceRecord) -> AttendanceRecord:
        with self._store.lock:
            data = self._store.load()
            next_id = max((int(d.get("record_id") or 0) for d in data["records"]), default=0) + 1
            stored = replace(record, record_id=next_id)
            data["records"].append(record_to_dict(stored))
            self._store.save(data)
            return stored
