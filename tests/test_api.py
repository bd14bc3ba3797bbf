import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from promptqr.api import app


@pytest.fixture()
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_qr_image_is_png(client):
    response = client.get("/api/081-234-5678")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "no-store"
    image = Image.open(io.BytesIO(response.content))
    assert image.format == "PNG"


def test_payload_endpoint_static(client):
    response = client.get("/api/0812345678/payload")
    assert response.status_code == 200
    body = response.json()
    assert body["payload"] == "00020101021129370016A000000677010111011300668123456785802TH530376463045D82"
    assert body["crc"] == "5D82"
    assert body["target_type"] == "phone"
    assert body["target"] == "0066812345678"
    assert body["display"] == "081-234-5678"
    assert body["amount"] is None
    assert body["point_of_initiation"] == "static"


@pytest.mark.parametrize("param", ["amont", "amount"])
def test_payload_endpoint_accepts_both_amount_spellings(client, param):
    response = client.get("/api/1234567890123/payload", params={param: "100"})
    assert response.status_code == 200
    body = response.json()
    assert body["amount"] == "100.00"
    assert body["point_of_initiation"] == "dynamic"
    assert body["payload"].endswith("6304BB6C")


def test_amont_takes_precedence_over_amount(client):
    response = client.get("/api/0812345678/payload", params={"amont": "5", "amount": "7"})
    assert response.json()["amount"] == "5.00"


@pytest.mark.parametrize(
    "path, params, code",
    [
        ("/api/123", {}, "ERR_IDENTIFIER_TOO_SHORT"),
        ("/api/abc/payload", {}, "ERR_EMPTY_IDENTIFIER"),
        ("/api/0812345678", {"amount": "-5"}, "ERR_AMOUNT_NEGATIVE"),
        ("/api/0812345678/payload", {"amount": "2000000"}, "ERR_AMOUNT_TOO_LARGE"),
        ("/api/0812345678", {"amont": "lots"}, "ERR_AMOUNT_INVALID"),
    ],
)
def test_validation_errors_map_to_400(client, path, params, code):
    response = client.get(path, params=params)
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == code
    assert body["error"]


def test_metrics_exposes_generated_payloads(client):
    client.get("/api/0812345678/payload")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "promptqr_payloads_generated_total" in response.text
    assert "promptqr_http_requests_total" in response.text
