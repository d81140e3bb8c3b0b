from __future__ import annotations

import io
from types import SimpleNamespace

import pytest

from src.qr_attendance.qr_attendance.container import build_services
from src.qr_attendance.qr_attendance.employees import qr
from src.qr_attendance.qr_attendance.employees.qr import render_qr_png
from src.qr_attendance.qr_attendance.main import create_app


@pytest.fixture
def container(employees_repo, attendance_repo):
    return build_services(employees_repo, attendance_repo)


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()


def _register(client, **overrides):
    payload = {"name": "Ana Quispe", "employee_id": "EMP001", "position": "Analista", "dni": "12345678"}
    payload.update(overrides)
    return client.post("/api/employees", json=payload)


def test_register_and_list(client):
    resp = _register(client)
    assert resp.status_code == 201
    assert resp.get_json()["employee"]["employee_id"] == "EMP001"

    listed = client.get("/api/employees").get_json()["employees"]
    assert [e["employee_id"] for e in listed] == ["EMP001"]
    assert listed[0]["lateness_count"] == 0


def test_register_duplicate_is_bad_request(client):
    _register(client)

    resp = _register(client, employee_id="EMP002")

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "El DNI ya está registrado"}


def test_scan_records_attendance(client, container):
    _register(client)

    resp = client.post("/api/attendance/scan", json={"employee_id": " EMP001 "})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["success"] is True
    assert body["record"]["employee_id"] == "EMP001"
    assert body["message"].startswith("Ana Quispe - ")
    assert len(container.attendance_repo.list_all()) == 1


def test_scan_unknown_employee(client):
    resp = client.post("/api/attendance/scan", json={"employee_id": "NOPE"})

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Empleado no encontrado"


def test_scan_image_requires_file(client):
    resp = client.post("/api/attendance/scan/image", data={})

    assert resp.status_code == 400


def test_scan_image_that_is_not_an_image_is_bad_request(client):
    resp = client.post(
        "/api/attendance/scan/image",
        data={"image": (io.BytesIO(b"not an image"), "scan.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "No se detectó un código QR en la imagen"


def test_scan_image_records_attendance(client, monkeypatch):
    _register(client)
    monkeypatch.setattr(qr, "_zbar_decode", lambda img: [SimpleNamespace(data=b"EMP001")])

    resp = client.post(
        "/api/attendance/scan/image",
        data={"image": (io.BytesIO(render_qr_png("EMP001")), "scan.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 201
    assert resp.get_json()["record"]["employee_id"] == "EMP001"


def test_today_and_dashboard(client):
    _register(client)
    client.post("/api/attendance/scan", json={"employee_id": "EMP001"})

    today = client.get("/api/attendance/today").get_json()["records"]
    dashboard = client.get("/api/dashboard").get_json()

    assert len(today) == 1
    assert dashboard["total_employees"] == 1
    assert dashboard["present_today"] == 1
    assert dashboard["records_today"] == 1


def test_profile_and_delete(client):
    _register(client)

    profile = client.get("/api/employees/EMP001").get_json()
    assert profile["absence_days"] == 0
    assert profile["last_attendance"] == "Sin registros"

    assert client.delete("/api/employees/EMP001").status_code == 200
    assert client.get("/api/employees/EMP001").status_code == 404
    assert client.delete("/api/employees/EMP001").status_code == 404


def test_qr_image(client):
    _register(client)

    resp = client.get("/api/employees/EMP001/qr.png?download=1")

    assert resp.status_code == 200
    assert resp.mimetype == "image/png"
    assert "QR_Ana_Quispe_EMP001.png" in resp.headers["Content-Disposition"]
    assert client.get("/api/employees/NOPE/qr.png").status_code == 404


def test_exports(client, container):
    assert client.get("/export/employees.csv").status_code == 400

    _register(client)
    container.attendance_service.record_attendance("EMP001")

    resp = client.get("/export/attendance.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.data.startswith(b"\xef\xbb\xbf")
    assert "Asistencia_" in resp.headers["Content-Disposition"]

    resp = client.get("/export/employees.csv")
    assert resp.status_code == 200
    assert "Empleados_" in resp.headers["Content-Disposition"]


def test_unexpected_error_is_500(client, container, monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(container.attendance_service, "dashboard_summary", _boom)

    resp = client.get("/api/dashboard")

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False
