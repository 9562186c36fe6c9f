"""Per-request access logging for the meeting service."""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("app.middleware.structured")

_RESET = "\u001b[0m"
_STATUS_COLORS = {
    2: "\u001b[32m",
    4: "\u001b[33m",
    5: "\u001b[31m",
}
_DEFAULT_COLOR = "\u001b[36m"

# Printed in this order on the console line.
_CONSOLE_FIELDS = (
    "timestamp",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "upload_bytes",
    "demo",
    "destination",
    "client_ip",
)


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log one colored console line and one JSON line per request.

    Only request metadata is logged. Upload bodies and the Notion database
    id itself never reach the access log; ``destination`` records whether
    the caller supplied one.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        entry = self._request_entry(request)

        try:
            response = await call_next(request)
        except Exception as exc:  # pragma: no cover - re-raised
            entry.update(status_code=500, duration_ms=_elapsed_ms(started), error=repr(exc))
            logger.exception(_console_line(entry))
            raise

        entry.update(status_code=response.status_code, duration_ms=_elapsed_ms(started))
        logger.info(_console_line(entry))
        logger.debug(json.dumps(entry, default=str, separators=(",", ":")))
        return response

    @staticmethod
    def _request_entry(request: Request) -> dict[str, Any]:
        headers = request.headers
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "method": request.method,
            "path": request.url.path,
            "upload_bytes": headers.get("content-length"),
            "demo": headers.get("x-demo-mode") == "true",
            "destination": bool(headers.get("x-notion-database-id")),
            "client_ip": request.client.host if request.client else None,
        }


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _console_line(entry: dict[str, Any]) -> str:
    status = entry.get("status_code") or 0
    color = _STATUS_COLORS.get(status // 100, _DEFAULT_COLOR)
    text = " ".join(
        f"{name}={'-' if entry.get(name) is None else entry.get(name)}"
        for name in _CONSOLE_FIELDS
    )
    return f"{color}{text}{_RESET}"
