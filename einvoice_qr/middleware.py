"""Request logging middleware for the QR service."""
from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .monitoring import observe_request

logger = logging.getLogger("einvoice_qr.http")

REQUEST_ID_HEADER = "X-Request-ID"


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    return route.path if route else request.url.path


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its outcome and latency."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "request failed",
                extra={"request_id": request_id, "method": request.method, "path": _route_path(request)},
            )
            observe_request(request.method, _route_path(request), 500, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        path = _route_path(request)
        logger.log(
            _level_for(response.status_code),
            "request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        observe_request(request.method, path, response.status_code, duration_ms)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
