"""
Products API — Health Check Route
===================================

What:  Liveness endpoint for container orchestrators and load balancers.
How:   The service has no external dependencies, so the check reports the
       catalog size and uptime; a process that can answer is healthy.
"""

import time

from fastapi import APIRouter

from app import __version__
from app.schemas.product import HealthResponse
from app.services.product_service import product_service

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        product_count=len(product_service.list_products()),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
