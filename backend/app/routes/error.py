"""
Products API — Generic Error Route
====================================

What:  GET /error, the generic error response for unhandled exceptions.
Why:   One stable, detail-free error shape for every failure the application
       does not handle itself.
Who:   Served directly at settings.error_path and reused by
       ExceptionHandlerMiddleware when a request fails mid-pipeline.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.middleware.request_id import request_id_var
from app.schemas.product import ErrorResponse

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."

router = APIRouter(tags=["Error"])


def build_error_response(request_id: str = "") -> JSONResponse:
    """Builds the 500 response shared by the route and the middleware."""
    body = ErrorResponse(
        error="internal_server_error",
        message=GENERIC_ERROR_MESSAGE,
        request_id=request_id or None,
    )
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


@router.get(
    settings.error_path,
    include_in_schema=False,
    response_model=ErrorResponse,
)
async def handle_error(request: Request) -> JSONResponse:
    rid = getattr(request.state, "request_id", None) or request_id_var.get("")
    return build_error_response(rid)
