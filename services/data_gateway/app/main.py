"""Data Gateway — FastAPI application factory.

Token-gated, read-only HTTP front for a Supabase project's tables.
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.auth import ApiTokenMiddleware
from app.core.config import GatewaySettings, settings as default_settings
from app.core.events import lifespan
from app.routers import health
from app.routers.tables import router as tables_router
from app.services.supabase import SupabaseClient

from shared.logging import get_logger, setup_logging
from shared.middleware import RequestContextMiddleware


def create_app(
    settings: GatewaySettings | None = None,
    database: SupabaseClient | None = None,
) -> FastAPI:
    """Construct the application around an explicit settings object.

    ``database`` may be injected (tests); otherwise it is built from
    ``settings`` during startup.
    """
    settings = settings or default_settings
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
    )

    application = FastAPI(
        title="Data Gateway",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.database = database

    # Last added runs first: CORS, then request context, then the token gate
    application.add_middleware(ApiTokenMiddleware, expected_token=settings.x_api_token)
    application.add_middleware(RequestContextMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health.router)
    application.include_router(tables_router)

    return application


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured port."""
    get_logger(__name__).info("server_listening", port=default_settings.port)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=default_settings.port,
        log_config=None,
    )
