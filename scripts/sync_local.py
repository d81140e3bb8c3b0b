"""Push the local JSON cache into the remote MySQL store.

Useful after the kiosk ran for a while without database access, or for the
initial migration of a cache-only install.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.qr_attendance.qr_attendance.container import build_container
from src.qr_attendance.qr_attendance.core.exceptions import StorageError
from src.qr_attendance.qr_attendance.main import configure_logging
from src.qr_attendance.qr_attendance.storage.sync import sync_local_to_remote


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(bool(getattr(settings, "DEBUG", False)))

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        local_store_path=settings.LOCAL_STORE_PATH,
        use_remote_db=True,
    )
    try:
        result = sync_local_to_remote(
            local_employees=container.local_employees_repo,
            local_records=container.local_attendance_repo,
            remote_employees=container.remote_employees_repo,
            remote_records=container.remote_attendance_repo,
        )
    except StorageError as e:
        raise SystemExit(f"Sync failed: {e}")

    print(
        f"OK: employees pushed={result.employees_pushed} skipped={result.employees_skipped}, "
        f"records pushed={result.records_pushed} skipped={result.records_skipped}"
    )


if __name__ == "__main__":
    main()
