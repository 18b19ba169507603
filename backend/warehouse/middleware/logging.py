"""
Warehouse Backend — Access Logging Middleware
===============================================

What:  One line per API call naming the record category and what happened
       to it.

Line format:
    POST /api/schedule -> 200 stored schedule in 4.1ms [a1b2c3d4]
    GET /api/users -> 500 failed users in 2.0ms [a1b2c3d4]

Outcomes:
    listed    GET answered with rows
    stored    POST accepted (including the duplicate-user no-op)
    rejected  4xx, the request never reached the database
    failed    5xx, or an exception escaped the route

Levels follow the outcome: failed → ERROR, rejected → WARNING, else INFO.
Request bodies are never logged (user payloads carry passwords).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from warehouse.middleware.request_id import request_id_var

logger = logging.getLogger("warehouse.access")

# Health checks poll this every few seconds
SILENT_PATHS = {"/health"}

_OUTCOME_LEVELS = {
    "failed": logging.ERROR,
    "rejected": logging.WARNING,
}


def record_category(path: str) -> str:
    """``/api/miscellaneous/save`` → ``miscellaneous``; non-API paths → ``-``."""
    parts = [part for part in path.split("/") if part]
    if len(parts) >= 2 and parts[0] == "api":
        return parts[1]
    return "-"


def classify_outcome(method: str, status: int) -> str:
    if status >= 500:
        return "failed"
    if status >= 400:
        return "rejected"
    if method == "POST":
        return "stored"
    return "listed"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs the category and outcome of each request with its duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SILENT_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start_time)
            raise

        self._log(request, response.status_code, start_time)
        return response

    @staticmethod
    def _log(request: Request, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        outcome = classify_outcome(request.method, status)
        logger.log(
            _OUTCOME_LEVELS.get(outcome, logging.INFO),
            "%s %s -> %d %s %s in %.1fms [%s]",
            request.method,
            request.url.path,
            status,
            outcome,
            record_category(request.url.path),
            duration_ms,
            request_id_var.get(""),
        )
