"""Middleware for request logging and security headers."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ohshub.core.config import get_settings
from ohshub.core.metrics import observe_http_request
from ohshub.core.structured_logging import log_json, new_request_id, request_id_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADERS = ("X-Request-ID", "X-Correlation-ID")
MAX_REQUEST_ID_LENGTH = 128

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}
HSTS_VALUE = "max-age=63072000; includeSubDomains"


def _incoming_request_id(request: Request) -> str | None:
    for header in REQUEST_ID_HEADERS:
        candidate = (request.headers.get(header) or "").strip()
        if (
            candidate
            and len(candidate) <= MAX_REQUEST_ID_LENGTH
            and "\n" not in candidate
            and "\r" not in candidate
        ):
            return candidate
    return None


def _served_over_https(request: Request) -> bool:
    return (request.headers.get("x-forwarded-proto") or request.url.scheme) == "https"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Set ``SECURITY_HEADERS`` on every response unless a route set them.

    HSTS is added only in production and only for HTTPS requests.
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if get_settings().environment == "production" and _served_over_https(request):
            response.headers.setdefault("Strict-Transport-Security", HSTS_VALUE)

        return response


def _status_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def route_template(request: Request) -> str:
    """Full path template of the matched route, ``unmatched`` for no match.

    Routes of an included router may report their path relative to the
    router prefix, so the leading segments the template does not cover are
    taken from the request path.
    """
    template = getattr(request.scope.get("route"), "path", None)
    if template is None:
        return "unmatched"

    segments = [s for s in request.url.path.split("/") if s]
    template_segments = [s for s in template.split("/") if s]
    prefix = segments[: max(len(segments) - len(template_segments), 0)]
    return "/" + "/".join(prefix + template_segments)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to each request and log its outcome.

    The id is taken from ``X-Request-ID`` / ``X-Correlation-ID`` when the
    client sends a usable one and echoed back in ``X-Request-ID``. Metrics
    are labelled with the route template, not the raw path.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _incoming_request_id(request) or new_request_id()
        request.state.request_id = request_id
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }
        started = time.perf_counter()

        with request_id_context(request_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                log_json(
                    logger,
                    logging.ERROR,
                    "request_error",
                    status_code=500,
                    duration_ms=round(_elapsed_ms(started), 2),
                    exception=type(exc).__name__,
                    error=str(exc),
                    **fields,
                )
                raise

            duration_ms = _elapsed_ms(started)
            response.headers.setdefault("X-Request-ID", request_id)

            observe_http_request(
                method=request.method,
                route=route_template(request),
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            log_json(
                logger,
                _status_log_level(response.status_code),
                "request",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
                **fields,
            )
            return response
