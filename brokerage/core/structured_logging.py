"""Structured logging helpers (PII-safe)."""

import logging
import time
import uuid
from typing import Any

from fastapi import Request

from brokerage.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger("brokerage.requests")


def configure_logging() -> None:
    """Configure root logging once from LOG_LEVEL."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def build_log_context(
    *,
    user_id: str | None = None,
    request_id: str | None = None,
    route: str | None = None,
    method: str | None = None,
    status: int | None = None,
    duration_ms: float | None = None,
) -> dict[str, Any]:
    """Return a PII-safe log context dict (ids and request shape only)."""
    context: dict[str, Any] = {}
    if user_id:
        context["user_id"] = user_id
    if request_id:
        context["request_id"] = request_id
    if route:
        context["route"] = route
    if method:
        context["method"] = method
    if status is not None:
        context["status"] = status
    if duration_ms is not None:
        context["duration_ms"] = round(duration_ms, 1)
    return context


async def log_requests(request: Request, call_next):
    """HTTP middleware: one log line per request, request id echoed back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    started = time.perf_counter()
    response = await call_next(request)
    context = build_log_context(
        request_id=request_id,
        route=request.url.path,
        method=request.method,
        status=response.status_code,
        duration_ms=(time.perf_counter() - started) * 1000,
    )
    logger.info("request handled %s", context, extra={"context": context})
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
