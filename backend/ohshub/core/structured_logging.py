"""JSON log lines with request correlation.

Every API request is bound to a correlation id held in a context variable;
``log_json`` picks it up so log lines from the service layer can be joined with
the request log line written by the middleware.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

_request_id: ContextVar[str | None] = ContextVar("ohshub_request_id", default=None)


def get_request_id() -> str | None:
    """Correlation id of the request being handled, if any."""
    return _request_id.get()


def new_request_id() -> str:
    return uuid4().hex


@contextmanager
def request_id_context(request_id: str | None) -> Iterator[None]:
    """Bind a correlation id for the duration of the block."""
    token = _request_id.set(request_id)
    try:
        yield
    finally:
        _request_id.reset(token)


def log_json(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """Emit one JSON log line for ``event`` with the given fields."""
    if not logger.isEnabledFor(level):
        return

    payload: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "event": event,
    }
    request_id = get_request_id()
    if request_id:
        payload["request_id"] = request_id

    payload.update(fields)
    logger.log(level, json.dumps(payload, default=str))
