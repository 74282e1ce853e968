"""
Products API — Custom Exception Hierarchy
===========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    ProductsApiError (base)
    └── NotFoundError            → 404 Not Found

Anything outside this hierarchy is treated as unexpected and answered by
ExceptionHandlerMiddleware with the generic /error response (500).
"""

from typing import Any, Dict, Optional


class ProductsApiError(Exception):
    """
    Base exception for all Products API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(ProductsApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/products/{id} with an id outside the seed set.
    HTTP:    404 Not Found, body {"message": <message>}
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found.", context=ctx)
        self.resource = resource
        self.resource_id = resource_id
