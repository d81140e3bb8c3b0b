import io
from types import SimpleNamespace

from PIL import Image

from src.qr_attendance.qr_attendance.employees import qr
from src.qr_attendance.qr_attendance.employees.qr import decode_qr_image, render_qr_png


def test_render_qr_png_returns_png_bytes():
    png = render_qr_png("EMP001")

    assert png.startswith(b"\x89PNG\r\n\x1a\n")


def test_box_size_and_border_set_image_size():
    img = Image.open(io.BytesIO(render_qr_png("EMP001", box_size=4, border=2)))

    # version 1 code: 21 modules plus the border on each side
    assert img.size == ((21 + 2 * 2) * 4, (21 + 2 * 2) * 4)


def test_decode_returns_first_payload_stripped(monkeypatch):
    seen = []

    def _decode(img):
        seen.append(img.mode)
        return [SimpleNamespace(data=b" EMP001\n"), SimpleNamespace(data=b"EMP002")]

    monkeypatch.setattr(qr, "_zbar_decode", _decode)

    assert decode_qr_image(io.BytesIO(render_qr_png("EMP001"))) == "EMP001"
    assert seen == ["RGB"]


def test_decode_without_code_is_none(monkeypatch):
    monkeypatch.setattr(qr, "_zbar_decode", lambda img: [])

    assert decode_qr_image(io.BytesIO(render_qr_png("EMP001"))) is None


def test_decode_unreadable_upload_is_none(monkeypatch):
    monkeypatch.setattr(qr, "_zbar_decode", lambda img: [SimpleNamespace(data=b"EMP001")])

    assert decode_qr_image(io.BytesIO(b"not an image")) is None
