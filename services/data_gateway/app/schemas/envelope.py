"""Pydantic schemas for the gateway's JSON envelopes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class SuccessEnvelope(BaseModel):
    """Rows returned by a table route."""

    status: Literal["success"] = "success"
    data: list[dict[str, Any]] = Field(
        ...,
        examples=[[{"id": 1, "bank": "bank_of_utah"}]],
    )
    timestamp: str = Field(..., examples=["2024-05-01T12:00:00.000Z"])


class ErrorEnvelope(BaseModel):
    """Fixed error body; upstream detail is never included."""

    status: Literal["error", "unhealthy"] = "error"
    error: str
