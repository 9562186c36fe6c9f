"""Telemetry middleware for request instrumentation."""

from __future__ import annotations

import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.telemetry import observe_request

UNTRACKED_PATHS = frozenset({"/metrics", "/health"})


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Collect request metrics for Prometheus, ignoring scrape and probe traffic."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in UNTRACKED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:  # pragma: no cover - re-raised
            observe_request(
                request.method,
                self._resolve_route(request),
                500,
                time.perf_counter() - start_time,
            )
            raise

        # The route is only attached to the scope once routing has run.
        observe_request(
            request.method,
            self._resolve_route(request),
            response.status_code,
            time.perf_counter() - start_time,
        )
        return response

    @staticmethod
    def _resolve_route(request: Request) -> str:
        """Return the route template when known, else the raw path."""

        scope_route: Any = request.scope.get("route")
        path = getattr(scope_route, "path", None)
        return path or request.url.path
