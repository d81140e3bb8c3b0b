from __future__ import annotations

import io
from typing import BinaryIO, Optional

import qrcode
from PIL import Image, UnidentifiedImageError

from ..core.constants import DEFAULT_QR_BORDER, DEFAULT_QR_BOX_SIZE


def render_qr_png(data: str, *, box_size: int = DEFAULT_QR_BOX_SIZE, border: int = DEFAULT_QR_BORDER) -> bytes:
    """PNG image of a QR code holding ``data`` (an employee identifier)."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _zbar_decode(img):
    from pyzbar.pyzbar import decode as pyzbar_decode

    return pyzbar_decode(img)


def decode_qr_image(stream: BinaryIO) -> Optional[str]:
    """First QR payload found in an uploaded image, stripped, or None.

    Uploads that are not a readable image also yield None.
    """
    try:
        img = Image.open(stream).convert("RGB")
    except (UnidentifiedImageError, OSError):
        return None
    decoded = _zbar_decode(img)
    if not decoded:
        return None
    return decoded[0].data.decode("utf-8").strip()
