"""Data Gateway — exception types."""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for gateway errors."""


class ConfigurationError(GatewayError):
    """Required configuration is missing or unusable."""


class UpstreamQueryError(GatewayError):
    """The upstream database rejected or failed a query."""

    def __init__(
        self,
        table: str,
        message: str,
        *,
        status_code: int | None = None,
    ) -> None:
        self.table = table
        self.message = message
        self.status_code = status_code
        super().__init__(f"{table}: {message}")
