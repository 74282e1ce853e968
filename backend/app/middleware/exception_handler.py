"""
Products API — Exception Handler Middleware
=============================================

What:  Catches any exception that escapes the rest of the pipeline and answers
       with the generic /error response.
Why:   Clients must never see a stack trace or a dropped connection; operators
       need the full traceback in the logs.
How:   Wraps call_next in try/except. Application errors (NotFoundError) never
       reach here: FastAPI's registered handlers turn them into responses
       inside the router.
When:  Outermost stage of the request pipeline proper (only request ID and
       access logging wrap it, so the 500 is logged and tagged).
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var
from app.routes.error import build_error_response

logger = logging.getLogger(__name__)


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """
    Converts unhandled exceptions into the generic error response.

    The response body is the same one GET /error returns, so a client
    sees a single error shape whether the failure happened in a handler,
    in a downstream middleware, or was requested directly.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            # Read by the access log to attribute the response to this stage
            request.state.unhandled_error = True
            logger.error(
                "[%s] Unhandled error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return build_error_response(rid)
