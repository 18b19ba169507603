"""
Warehouse Backend — Request ID and Last-Resort Error Middleware
=================================================================

What:  Tags every request with a correlation ID and turns any exception that
       escaped the route layer into the standard 500 error body.
How:   A client-supplied X-Request-ID is reused when it is a short token of
       letters, digits, dashes or underscores; anything else is replaced by a
       fresh 8-character hex ID. The ID lives in a ContextVar so exception
       handlers and services can log it.

Unhandled errors are answered here instead of in Starlette's outermost
ServerErrorMiddleware, so the 500 still passes back through CORSMiddleware
and carries both the CORS headers and X-Request-ID.
"""

import logging
import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a well-formed client ID, otherwise mint a new one."""
    if header_value and _CLIENT_ID_PATTERN.match(header_value):
        return header_value
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request ID and converts escaped exceptions into a 500."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))
        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unhandled error on %s %s: %s",
                rid, request.method, request.url.path, exc,
                exc_info=True,
            )
            response = JSONResponse(
                status_code=500,
                content={"error": UNEXPECTED_ERROR_MESSAGE, "request_id": rid},
            )

        response.headers["X-Request-ID"] = rid
        return response
