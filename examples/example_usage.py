"""Example: using the service layer without Flask.

Registers an employee in a throwaway local cache, records a scan and prints
the resulting profile metrics.
"""

import tempfile
from pathlib import Path

from src.qr_attendance.qr_attendance.common.datetime_utils import now_local
from src.qr_attendance.qr_attendance.container import build_container


def main():
    with tempfile.TemporaryDirectory() as tmp:
        container = build_container(
            db_config={},
            local_store_path=Path(tmp) / "asistencia.json",
            use_remote_db=False,
        )
        container.employee_service.register(name="Ana Quispe", employee_id="EMP001", position="Analista")
        record = container.attendance_service.record_attendance("EMP001", now=now_local())
        print(container.attendance_service.to_ui(record))
        print(container.attendance_service.employee_profile("EMP001"))


if __name__ == "__main__":
    main()
