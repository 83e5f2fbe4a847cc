"""Data Gateway — read-only table routes.

Every route is one ``select *`` against one upstream table, optionally with
fixed equality filters. All of them share a single handler factory.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import structlog
from fastapi import APIRouter, Depends, status

from app.core.database import get_database
from app.schemas.envelope import ErrorEnvelope, SuccessEnvelope
from app.services.supabase import EqualityFilter, SupabaseClient, TableQuery
from shared.responses import error_response, success_body

router = APIRouter(tags=["Tables"])
logger = structlog.get_logger()


@dataclass(frozen=True)
class TableRoute:
    """One GET endpoint mapped onto one upstream table read."""

    path: str
    table: str
    resource: str
    filters: tuple[EqualityFilter, ...] = field(default_factory=tuple)

    @property
    def query(self) -> TableQuery:
        return TableQuery(table=self.table, filters=self.filters)

    @property
    def error_message(self) -> str:
        return f"Failed to fetch {self.resource}"


TABLE_ROUTES: tuple[TableRoute, ...] = (
    TableRoute("/allowed-emails", "allowed_emails", "allowed emails"),
    TableRoute("/projects", "projects", "projects"),
    TableRoute("/project-completion", "project_completion", "project completion"),
    TableRoute("/inspection-reports", "inspection_reports", "inspection reports"),
    TableRoute("/financial-institutions", "financial_institutions", "financial institutions"),
    TableRoute("/line-item-inspections", "line_item_inspections", "line item inspections"),
    TableRoute("/project-messages", "project_messages", "project messages"),
    TableRoute(
        "/projects/bank-of-utah",
        "projects",
        "Bank of Utah projects",
        filters=(EqualityFilter("bank", "bank_of_utah"),),
    ),
)


def make_table_endpoint(route: TableRoute) -> Callable[..., Awaitable[Any]]:
    """Build the handler serving ``route``."""

    async def endpoint(database: SupabaseClient = Depends(get_database)) -> Any:
        try:
            rows = await database.fetch(route.query)
        except Exception:
            logger.exception(
                "table_fetch_failed",
                table=route.table,
                resource=route.resource,
            )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                route.error_message,
            )

        logger.info("table_fetched", table=route.table, rows=len(rows))
        return success_body(rows)

    endpoint.__name__ = "get_" + route.path.strip("/").replace("-", "_").replace("/", "_")
    return endpoint


for _route in TABLE_ROUTES:
    router.add_api_route(
        _route.path,
        make_table_endpoint(_route),
        methods=["GET"],
        summary=f"List {_route.resource}",
        response_model=None,
        responses={
            status.HTTP_200_OK: {"model": SuccessEnvelope},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorEnvelope},
        },
    )
