"""Data Gateway — health-check endpoints with database reachability probe."""

from __future__ import annotations

import structlog
from fastapi import Request

from app.core.database import get_database, get_settings
from app.services.supabase import TableQuery
from shared.health import create_health_router

logger = structlog.get_logger()


async def check_database(request: Request) -> None:
    """Read one row from the health-check table; raises if unreachable."""
    table = get_settings(request).health_check_table
    rows = await get_database(request).fetch(TableQuery(table=table, limit=1))
    logger.debug("health_check_rows", table=table, rows=len(rows))


router = create_health_router(check_database)
