"""
FastAPI endpoint tests for the Verhoeff Checksum API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import hashlib

import api
import pytest
from api import app
from fastapi.testclient import TestClient

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_service() -> None:
    """Initialise the service once for all API tests (bypasses lifespan)."""
    api._service = api._init_service()
    yield  # type: ignore[misc]
    api._service = None


VALID_NUMBER = "823519740628"


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["tables_verified"] is True

    def test_degraded_when_tables_fail(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(api, "_tables_verified", False)
        data = client.get("/health").json()
        assert data["status"] == "degraded"
        assert data["tables_verified"] is False

    def test_503_without_service(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(api, "_service", None)
        assert client.get("/health").status_code == 503


class TestValidateEndpoint:
    def test_valid_number(self) -> None:
        resp = client.post("/validate", json={"number": VALID_NUMBER})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["digit_count"] == 12

    def test_grouped_number(self) -> None:
        data = client.post("/validate", json={"number": "8235 1974 0628"}).json()
        assert data["is_valid"] is True

    def test_invalid_number(self) -> None:
        data = client.post("/validate", json={"number": "823519740627"}).json()
        assert data["is_valid"] is False

    def test_number_is_masked_and_hashed(self) -> None:
        resp = client.post("/validate", json={"number": VALID_NUMBER})
        data = resp.json()
        assert data["masked_number"] == "XXXXXXXX0628"
        assert data["number_hash"] == hashlib.sha256(VALID_NUMBER.encode()).hexdigest()
        assert VALID_NUMBER not in resp.text

    def test_parse_error_returns_422(self) -> None:
        resp = client.post("/validate", json={"number": "8235-1974-0628"})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "PARSE_ERROR"
        assert data["details"] == {"character": "-", "position": 4}

    def test_blank_number_returns_422(self) -> None:
        resp = client.post("/validate", json={"number": "   "})
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_INPUT"


class TestGenerateEndpoint:
    def test_generate(self) -> None:
        resp = client.post("/generate", json={"payload": "82351974062"})
        assert resp.status_code == 200
        assert resp.json() == {
            "payload": "82351974062",
            "check_digit": 8,
            "number": VALID_NUMBER,
        }

    def test_generated_number_validates(self) -> None:
        number = client.post("/generate", json={"payload": "75872"}).json()["number"]
        assert client.post("/validate", json={"number": number}).json()["is_valid"] is True

    def test_letters_return_422(self) -> None:
        resp = client.post("/generate", json={"payload": "12a"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "PARSE_ERROR"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        assert client.post("/validate", json={}).status_code == 422

    def test_empty_string_returns_422(self) -> None:
        assert client.post("/generate", json={"payload": ""}).status_code == 422

    def test_too_long_returns_422(self) -> None:
        resp = client.post("/validate", json={"number": "1" * (api.MAX_INPUT_LENGTH + 1)})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        assert client.post("/validate").status_code == 422
