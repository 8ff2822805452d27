from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.halolight.core.config import settings
from app.halolight.core.logging import log_json

logger = logging.getLogger("halolight.request")


def build_request_log_payload(
    *,
    request: Request,
    response: Response | None,
    latency_ms: float,
) -> dict:
    route = None
    scope_route = request.scope.get("route")
    if scope_route is not None:
        route = getattr(scope_route, "path", None)
    route = route or request.url.path
    status_code = getattr(response, "status_code", 500)
    session = getattr(request.state, "session", None)
    return {
        "event": "http_request",
        "trace_id": getattr(request.state, "trace_id", ""),
        "user_id": getattr(session, "user_id", None),
        "route": route,
        "method": request.method,
        "status_code": status_code,
        "latency_ms": round(latency_ms, 2),
        "error_code": getattr(request.state, "error_code", None),
        "error_class": getattr(request.state, "error_class", None),
    }


class ObservabilityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            if settings.REQUEST_LOGGING_ENABLED:
                latency_ms = (time.perf_counter() - start_time) * 1000
                payload = build_request_log_payload(request=request, response=response, latency_ms=latency_ms)
                log_json(logger, payload)
