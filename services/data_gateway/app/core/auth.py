"""Data Gateway — shared-secret header authentication."""

from __future__ import annotations

import secrets

import structlog
from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shared.responses import error_response

API_TOKEN_HEADER = "x-api-token"

logger = structlog.get_logger()


def token_matches(presented: str | None, expected: str) -> bool:
    """Constant-time comparison of the caller's token with the configured one."""
    if not presented:
        return False
    return secrets.compare_digest(presented.encode(), expected.encode())


class ApiTokenMiddleware(BaseHTTPMiddleware):
    """Rejects every request whose ``x-api-token`` header is not the configured secret.

    Runs before routing, so a rejected request never reaches a handler or
    the database client.
    """

    def __init__(self, app: ASGIApp, expected_token: str | None):
        super().__init__(app)
        self._expected_token = expected_token

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._expected_token:
            logger.error("api_token_not_configured")
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Server configuration error",
            )

        if not token_matches(request.headers.get(API_TOKEN_HEADER), self._expected_token):
            logger.warning("api_token_rejected", path=request.url.path)
            return error_response(
                status.HTTP_401_UNAUTHORIZED,
                "Invalid or missing API token",
            )

        return await call_next(request)
