"""Prometheus metrics for HTTP traffic and risk assessments."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

from ohshub.core.enums import RiskLevel

HTTP_REQUESTS_TOTAL = Counter(
    "ohshub_http_requests_total",
    "HTTP requests handled, by route template and status.",
    ["method", "route", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "ohshub_http_request_duration_seconds",
    "HTTP request duration in seconds.",
    ["method", "route", "status"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

RISK_ASSESSMENTS_TOTAL = Counter(
    "ohshub_risk_assessments_total",
    "Risk assessments computed, by theme and overall level.",
    ["theme", "overall_level"],
)


def observe_http_request(
    *,
    method: str,
    route: str,
    status_code: int,
    duration_ms: float,
) -> None:
    labels = {"method": method, "route": route, "status": str(status_code)}
    HTTP_REQUESTS_TOTAL.labels(**labels).inc()
    HTTP_REQUEST_DURATION_SECONDS.labels(**labels).observe(duration_ms / 1000.0)


def observe_assessment(*, theme_id: str, overall_level: RiskLevel) -> None:
    RISK_ASSESSMENTS_TOTAL.labels(theme=theme_id, overall_level=overall_level.value).inc()
