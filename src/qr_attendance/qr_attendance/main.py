from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import configure_timezone
from .container import Container, build_container
from .core.constants import DEFAULT_TIMEZONE
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[qr-attendance] %(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["QR_BOX_SIZE"] = int(getattr(settings, "QR_BOX_SIZE", 10))
    app.config["QR_BORDER"] = int(getattr(settings, "QR_BORDER", 2))

    configure_logging(app.config["DEBUG"])
    configure_timezone(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE))
    logger = logging.getLogger(__name__)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        use_remote_db = bool(getattr(settings, "USE_REMOTE_DB", True))
        logger.debug(
            "settings=%s db=%s@%s:%s/%s remote=%s",
            settings_module,
            db_config.get("user"), db_config.get("host"), db_config.get("port", 3306), db_config.get("database"),
            use_remote_db,
        )

        if use_remote_db and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            local_store_path=getattr(settings, "LOCAL_STORE_PATH"),
            use_remote_db=use_remote_db,
            late_tolerance_minutes=int(getattr(settings, "LATE_TOLERANCE_MINUTES", 0)),
        )

    app.extensions["qr_attendance"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
