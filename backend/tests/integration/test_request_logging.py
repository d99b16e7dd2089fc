"""Integration tests for request correlation, logging and security headers."""

import json
import logging

import pytest
from httpx import AsyncClient


def _events(caplog: pytest.LogCaptureFixture) -> list[dict]:
    events = []
    for record in caplog.records:
        try:
            events.append(json.loads(record.getMessage()))
        except ValueError:
            continue
    return events


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/api/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_correlation_id_is_accepted(client: AsyncClient):
    response = await client.get("/api/health", headers={"X-Correlation-ID": "corr-9"})

    assert response.headers["X-Request-ID"] == "corr-9"


@pytest.mark.asyncio
async def test_request_id_is_generated_when_missing(client: AsyncClient):
    response = await client.get("/api/health")

    request_id = response.headers["X-Request-ID"]
    assert len(request_id) == 32
    int(request_id, 16)


@pytest.mark.asyncio
async def test_oversized_request_id_is_replaced(client: AsyncClient):
    response = await client.get("/api/health", headers={"X-Request-ID": "x" * 200})

    assert response.headers["X-Request-ID"] != "x" * 200


@pytest.mark.asyncio
async def test_security_headers(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "no-referrer"
    assert "Strict-Transport-Security" not in response.headers


@pytest.mark.asyncio
async def test_hsts_behind_https_in_production(client: AsyncClient, production_settings):
    response = await client.get("/api/health", headers={"X-Forwarded-Proto": "https"})

    assert response.headers["Strict-Transport-Security"].startswith("max-age=")


@pytest.mark.asyncio
async def test_request_and_assessment_are_logged_with_request_id(
    client: AsyncClient,
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.INFO, logger="ohshub"):
        response = await client.post(
            "/api/themes/vibration/assessment",
            json={"answers": {}},
            headers={"X-Request-ID": "assess-1"},
        )

    assert response.status_code == 200
    events = {e["event"]: e for e in _events(caplog)}

    assessment = events["risk_assessment"]
    assert assessment["request_id"] == "assess-1"
    assert assessment["theme"] == "vibration"
    assert assessment["overall_level"] == "low"

    request = events["request"]
    assert request["request_id"] == "assess-1"
    assert request["status_code"] == 200
    assert request["path"] == "/api/themes/vibration/assessment"


@pytest.mark.asyncio
async def test_client_errors_are_logged_as_warnings(
    client: AsyncClient,
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.INFO, logger="ohshub"):
        response = await client.get("/api/themes/radiation")

    assert response.status_code == 404
    warnings = [
        r for r in caplog.records if r.name.startswith("ohshub") and r.levelno == logging.WARNING
    ]
    assert any(json.loads(r.getMessage())["status_code"] == 404 for r in warnings)


@pytest.mark.asyncio
async def test_cors_preflight_passes_through_logging_and_headers(client: AsyncClient):
    """Preflights answered by CORS still get a request id and security headers."""
    response = await client.options(
        "/api/themes",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
            "X-Request-ID": "preflight-1",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["X-Request-ID"] == "preflight-1"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
