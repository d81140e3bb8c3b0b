from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_time_12h
from ..common.http import api_errors, json_error
from ..container import Container
from ..core.constants import NO_RECORDS_LABEL
from ..employees.qr import decode_qr_image
from .schedule import event_label
from .service import AttendanceService


def register(app: Flask, container: Container) -> None:
    def _recorded(record):
        message = (
            f"{record.employee_name} - {event_label(record.event_kind)} registrado: "
            f"{format_time_12h(record.event_time)}"
        )
        return jsonify({
            "success": True,
            "message": message,
            "record": AttendanceService.to_ui(record),
        }), 201

    @app.route("/api/attendance/scan", methods=["POST"], endpoint="attendance_scan")
    @api_errors
    def attendance_scan():
        """Scanned (or typed) employee identifier -> attendance record."""
        data = request.get_json(silent=True) or request.form
        record = container.attendance_service.record_attendance(data.get("employee_id", ""))
        return _recorded(record)

    @app.route("/api/attendance/scan/image", methods=["POST"], endpoint="attendance_scan_image")
    @api_errors
    def attendance_scan_image():
        if "image" not in request.files:
            return json_error("Falta el archivo de imagen", 400)

        scanned = decode_qr_image(request.files["image"].stream)
        if not scanned:
            return json_error("No se detectó un código QR en la imagen", 400)

        record = container.attendance_service.record_attendance(scanned)
        return _recorded(record)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @api_errors
    def attendance_today():
        records = container.attendance_service.today_records()
        return jsonify({"success": True, "records": [AttendanceService.to_ui(r) for r in records]})

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @api_errors
    def dashboard():
        summary = container.attendance_service.dashboard_summary()
        return jsonify({
            "success": True,
            "total_employees": summary.total_employees,
            "present_today": summary.present_today,
            "records_today": summary.records_today,
            "last_activity": (
                format_time_12h(summary.last_activity) if summary.last_activity else NO_RECORDS_LABEL
            ),
        })
