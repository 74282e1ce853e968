"""
Products API — Request Logging Middleware
===========================================

What:  One access-log line per HTTP request, naming the pipeline stage that
       produced the response.
Why:   Shows each request's path through the pipeline: which stage answered
       it, with what status, and how long it took.
How:   Times call_next, then reads the endpoint the router recorded in the
       ASGI scope to tell the stages apart.
When:  Just inside RequestIDMiddleware (uses the request ID for correlation),
       outside ExceptionHandlerMiddleware (so unhandled errors log as 500).

Stages:
    https_redirect     307 from HTTPSRedirectMiddleware, router never reached
    router             no route matched (framework 404/405)
    exception_handler  endpoint raised, generic /error body returned
    endpoint           route handler produced the response

Example line:
    GET /api/products/121 200 0.8ms stage=endpoint handler=get_product [a1b2c3d4]
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("products_api.access")

# Liveness probes, not logged
SILENT_PATHS = {"/health"}


def pipeline_stage(request: Request, status: int) -> str:
    """Name the stage that answered, from the scope the router filled in."""
    if getattr(request.state, "unhandled_error", False):
        return "exception_handler"
    if request.scope.get("endpoint") is None:
        if 300 <= status < 400 and request.url.scheme == "http":
            return "https_redirect"
        return "router"
    return "endpoint"


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs stage, handler, status and duration of each HTTP request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SILENT_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        status = response.status_code
        endpoint = request.scope.get("endpoint")
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms stage=%s handler=%s [%s]",
            request.method,
            request.url.path,
            status,
            elapsed_ms,
            pipeline_stage(request, status),
            getattr(endpoint, "__name__", "-"),
            request_id_var.get(""),
        )
        return response
