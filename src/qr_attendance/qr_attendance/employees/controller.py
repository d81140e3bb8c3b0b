from __future__ import annotations

import io

from flask import Flask, request, jsonify, send_file

from ..attendance.service import AttendanceService
from ..common.http import api_errors, json_error
from ..container import Container
from .model import Employee
from .qr import render_qr_png


def employee_to_json(e: Employee) -> dict:
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


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @api_errors
    def employees_list():
        employees = container.employee_service.search(request.args.get("q", ""))
        rows = container.attendance_service.employees_overview(employees)
        return jsonify({
            "success": True,
            "employees": [
                {
                    **employee_to_json(row.employee),
                    "lateness_count": row.lateness_count,
                    "absence_days": row.absence_days,
                }
                for row in rows
            ],
        })

    @app.route("/api/employees", methods=["POST"], endpoint="employees_register")
    @api_errors
    def employees_register():
        data = request.get_json(silent=True) or request.form
        employee = container.employee_service.register(
            name=data.get("name", ""),
            employee_id=data.get("employee_id", ""),
            position=data.get("position", ""),
            area=data.get("area"),
            phone=data.get("phone"),
            dni=data.get("dni"),
        )
        return jsonify({
            "success": True,
            "message": "Empleado registrado exitosamente",
            "employee": employee_to_json(employee),
        }), 201

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="employees_profile")
    @api_errors
    def employees_profile(employee_id: str):
        profile = container.attendance_service.employee_profile(employee_id)
        return jsonify({
            "success": True,
            "employee": employee_to_json(profile.employee),
            "absence_days": profile.absence_days,
            "lateness_count": profile.lateness_count,
            "attended_days": profile.attended_days,
            "total_records": profile.total_records,
            "last_attendance": AttendanceService.last_record_label(profile.last_record),
        })

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @api_errors
    def employees_delete(employee_id: str):
        container.employee_service.delete(employee_id)
        return jsonify({"success": True, "message": "Empleado eliminado"})

    @app.route("/api/employees/<employee_id>/qr.png", endpoint="employees_qr_image")
    @api_errors
    def employees_qr_image(employee_id: str):
        """QR image holding the employee identifier, for printing or download."""
        employee = container.employee_service.get(employee_id)
        if not employee:
            return json_error("Empleado no encontrado", 404)

        png = render_qr_png(
            employee.employee_id,
            box_size=int(app.config.get("QR_BOX_SIZE", 10)),
            border=int(app.config.get("QR_BORDER", 2)),
        )
        download = request.args.get("download") == "1"
        safe_name = "_".join(employee.name.split())
        return send_file(
            io.BytesIO(png),
            mimetype="image/png",
            as_attachment=download,
            download_name=f"QR_{safe_name}_{employee.employee_id}.png",
        )
