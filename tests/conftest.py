"""Shared fixtures: explicit settings, a fake Supabase upstream, a test client."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import GatewaySettings
from app.main import create_app
from app.services.supabase import SupabaseClient

API_TOKEN = "test-api-token"
SUPABASE_URL = "https://example.supabase.co"
SUPABASE_KEY = "anon-key"


class FakeSupabase:
    """Stands in for the PostgREST endpoint and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.rows: dict[str, list[dict[str, Any]]] = {}
        self.failing: set[str] = set()
        self.bodies: dict[str, Any] = {}
        self.down = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)

        table = request.url.path.rsplit("/", 1)[-1]
        if table in self.failing:
            return httpx.Response(
                400,
                json={"code": "42P01", "message": f'relation "{table}" does not exist'},
            )
        if table in self.bodies:
            return httpx.Response(200, json=self.bodies[table])

        rows = self.rows.get(table, [])
        for column, value in request.url.params.multi_items():
            if column in ("select", "limit"):
                continue
            expected = value.removeprefix("eq.")
            rows = [row for row in rows if str(row.get(column)) == expected]
        if "limit" in request.url.params:
            rows = rows[: int(request.url.params["limit"])]
        return httpx.Response(200, json=rows)

    def tables_queried(self) -> list[str]:
        return [r.url.path.rsplit("/", 1)[-1] for r in self.requests]


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(
        _env_file=None,
        supabase_url=SUPABASE_URL,
        supabase_anon_key=SUPABASE_KEY,
        x_api_token=API_TOKEN,
        health_check_table="profiles",
        log_level="WARNING",
    )


@pytest.fixture
def upstream() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def database(settings: GatewaySettings, upstream: FakeSupabase):
    db = SupabaseClient.from_settings(
        settings, transport=httpx.MockTransport(upstream.handler)
    )
    yield db
    asyncio.run(db.aclose())


@pytest.fixture
def client(settings: GatewaySettings, database: SupabaseClient):
    app = create_app(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"x-api-token": API_TOKEN}


@pytest.fixture
def logged_events(caplog):
    """Structlog event dicts that reached stdlib logging during the test."""

    def events(name: str | None = None) -> list[dict[str, Any]]:
        found = [r.msg for r in caplog.records if isinstance(r.msg, dict)]
        if name is not None:
            found = [e for e in found if e.get("event") == name]
        return found

    return events
