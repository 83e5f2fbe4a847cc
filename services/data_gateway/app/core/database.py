"""Data Gateway — request-scoped access to the upstream database client."""

from __future__ import annotations

from fastapi import Request

from app.core.config import GatewaySettings
from app.services.supabase import SupabaseClient


def get_database(request: Request) -> SupabaseClient:
    """FastAPI dependency — the client built during application startup."""
    return request.app.state.database


def get_settings(request: Request) -> GatewaySettings:
    """FastAPI dependency — the settings the application was created with."""
    return request.app.state.settings
