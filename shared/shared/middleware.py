"""ASGI middleware binding per-request context into structlog.

Reuses an inbound ``X-Request-ID`` / ``X-Correlation-ID`` when the caller
sends one, otherwise mints fresh IDs, and echoes both on the response.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORRELATION_HEADER = "X-Correlation-ID"
REQUEST_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request ID, correlation ID, method and path for every log line."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_HEADER) or str(uuid.uuid4())
        correlation_id = request.headers.get(CORRELATION_HEADER) or request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )

        response: Response = await call_next(request)

        response.headers[REQUEST_HEADER] = request_id
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
