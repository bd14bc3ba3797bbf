"""QR image renderer for PromptPay payloads."""
from __future__ import annotations

import base64
import io
from typing import Any

import qrcode
from PIL import Image, ImageDraw, ImageFont

BOX_SIZE = 6
BORDER = 2


def generate_qr_image(data: str, title: str | None = None) -> Image.Image:
    """Rasterize ``data`` into a QR image, optionally framed with a caption."""

    qr = qrcode.QRCode(version=None, error_correction=qrcode.constants.ERROR_CORRECT_M, box_size=BOX_SIZE, border=BORDER)
    qr.add_data(data)
    qr.make(fit=True)

    qr_img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    if not title:
        return qr_img

    width, height = qr_img.size
    label_height = 28
    canvas = Image.new("RGB", (width, height + label_height), color="#FFFFFF")
    canvas.paste(qr_img, (0, 0))

    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    left, top, right, bottom = draw.textbbox((0, 0), title, font=font)
    text_x = (width - (right - left)) // 2
    text_y = height + (label_height - (bottom - top)) // 2 - top
    draw.text((text_x, text_y), title, fill="#1F2937", font=font)

    return canvas


def qr_image_to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render_qr_payload(payload: str, title: str | None = None) -> dict[str, Any]:
    """Render payload into PNG bytes and base64 string."""

    png_bytes = qr_image_to_png_bytes(generate_qr_image(payload, title=title))
    return {
        "png_bytes": png_bytes,
        "png_base64": base64.b64encode(png_bytes).decode("ascii"),
    }
