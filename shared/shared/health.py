"""Reusable health-check router.

Provides ``/health`` (process plus database reachability) and
``/server-health`` (process liveness only). The database probe is an async
callable that raises when the dependency is unreachable.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from shared.responses import error_response, utc_timestamp

DatabaseProbe = Callable[[Request], Awaitable[Any]]

logger = structlog.get_logger()


def create_health_router(database_probe: DatabaseProbe) -> APIRouter:
    """Build a health router around a database probe.

    Args:
        database_probe: Async callable taking the current request; it must
            raise if the database cannot be queried.

    Returns:
        A FastAPI ``APIRouter`` with ``/health`` and ``/server-health``.
    """
    router = APIRouter(tags=["health"])

    @router.get("/health", summary="Database reachability probe")
    async def health(request: Request) -> Any:
        try:
            await database_probe(request)
        except Exception:
            logger.exception("health_check_failed")
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Database connection failed",
                status="unhealthy",
            )

        return JSONResponse(
            content={
                "status": "healthy",
                "database": "connected",
                "timestamp": utc_timestamp(),
            }
        )

    @router.get("/server-health", summary="Process liveness probe")
    async def server_health() -> dict[str, str]:
        return {"status": "healthy", "timestamp": utc_timestamp()}

    return router
