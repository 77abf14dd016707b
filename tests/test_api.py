import base64

import pytest
from fastapi.testclient import TestClient

from einvoice_qr.api import app
from einvoice_qr.config import settings

HEADERS = {"X-API-Key": settings.api_key}

BODY = {
    "seller_name": "Acme Co",
    "seller_trn": "300000000000003",
    "invoice_date": "2026-02-23T18:30:00+03:00",
    "invoice_total": "115",
    "vat_total": "15",
}


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_qr(client):
    response = client.post("/v1/qr", json=BODY, headers=HEADERS)
    assert response.status_code == 200
    data = response.json()
    assert data["payload_base64"] == (
        "AQdBY21lIENvAg8zMDAwMDAwMDAwMDAwMDMDGTIwMjYtMDItMjNUMTg6MzA6MDArMDM6MDAEAzExNQUCMTU="
    )
    assert data["payload_hex"].startswith("010741636d6520436f020f")
    assert base64.b64decode(data["qr_png_base64"]).startswith(b"\x89PNG")
    assert "X-Request-ID" in response.headers


def test_generate_qr_without_image(client):
    body = dict(BODY, invoice_date="2026-02-23", include_image=False)
    response = client.post("/v1/qr", json=body, headers=HEADERS)
    assert response.status_code == 200
    assert response.json()["invoice_date"] == "2026-02-23T00:00:00+03:00"
    assert response.json()["qr_png_base64"] is None


def test_requires_api_key(client):
    response = client.post("/v1/qr", json=BODY, headers={"X-API-Key": "wrong"})
    assert response.status_code == 401


def test_missing_fields(client):
    body = dict(BODY, seller_name=" ", include_image=False)
    response = client.post("/v1/qr", json=body, headers=HEADERS)
    assert response.status_code == 400
    assert response.json()["code"] == "ERR_MISSING_FIELDS"
    assert response.json()["errors"] == ["seller_name"]


def test_validation_errors(client):
    body = dict(BODY, seller_trn="200000000000003", vat_total="1,5", include_image=False)
    response = client.post("/v1/qr", json=body, headers=HEADERS)
    assert response.status_code == 422
    assert response.json() == {
        "code": "ERR_VALIDATION",
        "message": "TRN must start with 3 and end with 3.\nVAT Total must not contain decimals.",
        "errors": ["TRN must start with 3 and end with 3.", "VAT Total must not contain decimals."],
    }


def test_metrics_count_generated_payloads(client):
    client.post("/v1/qr", json=dict(BODY, include_image=False), headers=HEADERS)
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "einvoice_qr_payloads_generated_total" in response.text
