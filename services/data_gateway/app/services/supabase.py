"""Data Gateway — Supabase (PostgREST) read client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from app.core.config import GatewaySettings
from app.core.exceptions import ConfigurationError, UpstreamQueryError

logger = structlog.get_logger()

REST_PATH = "/rest/v1/"


@dataclass(frozen=True)
class EqualityFilter:
    """A single ``column = value`` condition."""

    column: str
    value: str

    def as_param(self) -> tuple[str, str]:
        return self.column, f"eq.{self.value}"


@dataclass(frozen=True)
class TableQuery:
    """A ``select *`` against one table, optionally filtered and limited."""

    table: str
    filters: tuple[EqualityFilter, ...] = field(default_factory=tuple)
    limit: int | None = None

    def params(self) -> list[tuple[str, str]]:
        params = [("select", "*")]
        params.extend(f.as_param() for f in self.filters)
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        return params


class SupabaseClient:
    """Thin async wrapper over the PostgREST endpoint of a Supabase project."""

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    @classmethod
    def from_settings(
        cls,
        settings: GatewaySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> SupabaseClient:
        """Build a client from settings; refuses to build without credentials."""
        if not settings.has_database_credentials:
            raise ConfigurationError("Missing Supabase credentials")

        key = settings.supabase_anon_key
        http_client = httpx.AsyncClient(
            base_url=settings.supabase_url.rstrip("/") + REST_PATH,
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            },
            timeout=settings.supabase_timeout_seconds,
            transport=transport,
        )
        return cls(http_client)

    async def fetch(self, query: TableQuery) -> list[dict[str, Any]]:
        """Run ``query`` and return the rows exactly as the upstream sent them."""
        try:
            response = await self._http.get(query.table, params=query.params())
        except httpx.HTTPError as exc:
            raise UpstreamQueryError(query.table, str(exc) or type(exc).__name__) from exc

        if response.is_error:
            raise UpstreamQueryError(
                query.table,
                _error_message(response),
                status_code=response.status_code,
            )

        try:
            rows = response.json()
        except ValueError as exc:
            raise UpstreamQueryError(
                query.table,
                "Upstream returned a non-JSON body",
                status_code=response.status_code,
            ) from exc

        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise UpstreamQueryError(
                query.table,
                "Upstream returned something other than a list of rows",
                status_code=response.status_code,
            )

        logger.debug("supabase_query", table=query.table, rows=len(rows))
        return rows

    async def aclose(self) -> None:
        await self._http.aclose()


def _error_message(response: httpx.Response) -> str:
    """Pull PostgREST's ``message`` out of an error body, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text
