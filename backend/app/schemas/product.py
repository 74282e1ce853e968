"""
Products API — Pydantic Response Schemas
==========================================

What:  Pydantic models defining the API contract.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI uses these models to serialize responses and document them
       in Swagger/OpenAPI.
Who:   Returned by the service layer and the route handlers.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Models
# ══════════════════════════════════════════════════════════════════════════


class Product(BaseModel):
    """
    A product record: an integer identifier and a display name.

    Serialized field names are exactly `id` and `name`. Instances are
    frozen; the seed set is never mutated after process start.
    """
    id: int = Field(description="Product identifier")
    name: str = Field(description="Product display name")

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class NotFoundResponse(BaseModel):
    """Body of a 404 from the products endpoint."""
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    What:  Generic error format returned by the /error route.
    Why:   Unhandled exceptions must not leak internals; clients get a stable
           shape plus a correlation ID for support.

    Example:
        {
            "error": "internal_server_error",
            "message": "An error occurred while processing your request.",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response for liveness probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    product_count: int = Field(description="Number of products served")
    uptime_seconds: float = Field(description="Seconds since service started")
