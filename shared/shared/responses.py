"""JSON envelope helpers shared by every gateway route.

Success bodies carry ``status``, the payload and a ``timestamp``; error
bodies carry only ``status`` and a fixed ``error`` string.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def success_body(data: Any) -> dict[str, Any]:
    return {"status": "success", "data": data, "timestamp": utc_timestamp()}


def error_body(message: str, *, status: str = "error") -> dict[str, str]:
    return {"status": status, "error": message}


def error_response(
    status_code: int, message: str, *, status: str = "error"
) -> JSONResponse:
    """Build a ``JSONResponse`` carrying the fixed error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=error_body(message, status=status),
    )
