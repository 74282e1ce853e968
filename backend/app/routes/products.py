"""
Products API — Product Route Handlers
=======================================

What:  Handles GET /api/products/{id}.
Why:   The single business endpoint of the service.
How:   FastAPI parses the integer path segment, the handler delegates to
       ProductService, and the returned model is serialized to JSON.

Responses:
    200: {"id": 121, "name": "Laptop"}
    404: {"message": "Product not found."}   (NotFoundError handler in main.py)
    422: FastAPI's default body when the path segment is not an integer
"""

from fastapi import APIRouter

from app.schemas.product import ErrorResponse, NotFoundResponse, Product
from app.services.product_service import product_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Products"])


@router.get(
    "/products/{product_id}",
    response_model=Product,
    responses={
        200: {"description": "The product", "model": Product},
        404: {"description": "Product not found", "model": NotFoundResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single product by ID",
)
async def get_product(product_id: int) -> Product:
    """
    Look up one product.

    Args:
        product_id: Integer path parameter. Non-integers return 422
                    Unprocessable Entity (FastAPI default); any integer
                    outside the catalog returns 404.
    """
    return product_service.get_product(product_id)
