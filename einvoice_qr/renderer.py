"""QR image rendering and PNG persistence."""
from __future__ import annotations

import base64
import io
from pathlib import Path
from typing import Any

import qrcode
from PIL import Image

from .config import ErrorCorrectionLevel, settings

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


def generate_qr_image(
    data: str,
    error_correction: ErrorCorrectionLevel = "M",
    box_size: int | None = None,
    border: int | None = None,
) -> Image.Image:
    """Generate a plain black-on-white QR image for ``data``."""

    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECTION_LEVELS[error_correction],
        box_size=box_size or settings.qr_box_size,
        border=settings.qr_border if border is None else border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    return qr.make_image(fill_color="black", back_color="white").convert("RGB")


def qr_image_to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render_qr_payload(
    payload: str,
    error_correction: ErrorCorrectionLevel = "M",
    box_size: int | None = None,
    border: int | None = None,
) -> dict[str, Any]:
    """Render payload into PNG bytes and base64 string."""

    image = generate_qr_image(payload, error_correction=error_correction, box_size=box_size, border=border)
    png_bytes = qr_image_to_png_bytes(image)
    return {
        "png_bytes": png_bytes,
        "png_base64": base64.b64encode(png_bytes).decode("ascii"),
    }


def save_png(png_bytes: bytes, directory: Path | str, filename: str) -> Path:
    """Write PNG bytes under ``directory`` (created if needed) and return the absolute path."""

    out_dir = Path(directory).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)
    file_path = out_dir / filename
    file_path.write_bytes(png_bytes)
    return file_path
