"""
Products API — Request ID Middleware
======================================

What:  Assigns a short correlation ID to each incoming request and echoes it
       in the response.
Why:   Every log line for a request, including the traceback of a 500, can be
       matched with what the client saw.
How:   Uses the client's X-Request-ID header if present, otherwise generates
       one; stores it in a ContextVar and in request.state.
When:  Outermost middleware (runs before all other processing).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. If the client sent X-Request-ID, reuse it
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in ContextVar (loggers, error responses) and request.state
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
