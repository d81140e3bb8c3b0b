from __future__ import annotations

from flask import Flask

from ..common.http import api_errors
from ..container import Container
from .service import ExportFile


def register(app: Flask, container: Container) -> None:
    def _send(export: ExportFile):
        return app.response_class(
            export.content,
            mimetype=export.mimetype,
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/export/attendance.csv", methods=["GET"], endpoint="export_attendance_csv")
    @api_errors
    def export_attendance_csv():
        return _send(container.report_service.daily_attendance_csv())

    @app.route("/export/employees.csv", methods=["GET"], endpoint="export_employees_csv")
    @api_errors
    def export_employees_csv():
        return _send(container.report_service.employees_csv())
