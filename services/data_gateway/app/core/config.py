"""Data Gateway — environment-based configuration."""

from __future__ import annotations

from pydantic import Field

from shared.config import BaseServiceSettings


class GatewaySettings(BaseServiceSettings):
    """Settings specific to the Data Gateway.

    Database credentials are optional here so the settings object can be
    built anywhere; the lifespan refuses to start without them.
    """

    service_name: str = "data_gateway"
    port: int = 3000

    # Upstream Supabase project
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    supabase_timeout_seconds: float = Field(default=5.0, gt=0)

    # Shared secret callers present in the x-api-token header
    x_api_token: str | None = None

    # Table probed by /health (one row)
    health_check_table: str = "profiles"

    @property
    def has_database_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


settings = GatewaySettings()
