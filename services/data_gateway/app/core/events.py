"""Data Gateway — application lifespan (startup / shutdown hooks)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from app.services.supabase import SupabaseClient

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the database client on startup and release it on shutdown.

    An injected client is left open; only a client built here is closed.

    Raises ``ConfigurationError`` when the Supabase credentials are missing,
    which aborts startup before the server accepts any connection.
    """
    settings = app.state.settings
    log.info(
        "data_gateway starting up",
        supabase_url=settings.supabase_url,
        health_check_table=settings.health_check_table,
    )

    owns_client = app.state.database is None
    if owns_client:
        app.state.database = SupabaseClient.from_settings(settings)

    yield

    log.info("data_gateway shutting down")
    if owns_client:
        await app.state.database.aclose()
