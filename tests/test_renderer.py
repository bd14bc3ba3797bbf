import base64
import io

from PIL import Image

from promptqr.renderer import generate_qr_image, qr_image_to_png_bytes, render_qr_payload

PAYLOAD = "00020101021129370016A000000677010111011300668123456785802TH530376463045D82"


def test_generate_qr_image_is_square_without_title():
    image = generate_qr_image(PAYLOAD)
    width, height = image.size
    assert width == height


def test_title_adds_caption_band():
    plain = generate_qr_image(PAYLOAD)
    titled = generate_qr_image(PAYLOAD, title="PromptPay")
    assert titled.size[0] == plain.size[0]
    assert titled.size[1] > plain.size[1]


def test_render_qr_payload_returns_png_and_base64():
    rendered = render_qr_payload(PAYLOAD)
    assert rendered["png_bytes"].startswith(b"\x89PNG")
    assert base64.b64decode(rendered["png_base64"]) == rendered["png_bytes"]
    assert Image.open(io.BytesIO(rendered["png_bytes"])).format == "PNG"


def test_qr_image_to_png_bytes_roundtrips_size():
    image = generate_qr_image(PAYLOAD)
    reopened = Image.open(io.BytesIO(qr_image_to_png_bytes(image)))
    assert reopened.size == image.size
