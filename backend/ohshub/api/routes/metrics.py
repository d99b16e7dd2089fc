"""Prometheus scrape endpoint."""

from __future__ import annotations

import hmac

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from ohshub.core.config import Settings, get_settings

router = APIRouter()


def _scrape_token(authorization: str | None, header_token: str | None) -> str | None:
    scheme, _, credentials = (authorization or "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return header_token


def require_scrape_token(
    authorization: str | None = Header(default=None),
    x_metrics_token: str | None = Header(default=None, alias="X-Metrics-Token"),
    settings: Settings = Depends(get_settings),
) -> None:
    """Guard the endpoint in production.

    Raises:
        HTTPException: 404 when no scrape token is configured, 403 when the
            request does not carry it
    """
    if settings.environment != "production":
        return

    if not settings.metrics_token:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    presented = _scrape_token(authorization, x_metrics_token)
    if presented is None or not hmac.compare_digest(presented, settings.metrics_token):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


@router.get(
    "/metrics",
    include_in_schema=False,
    dependencies=[Depends(require_scrape_token)],
)
async def scrape_metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
