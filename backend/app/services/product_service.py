"""
Products API — Product Service
================================

What:  Lookup of product records from a fixed in-memory list.
Why:   Keeps the lookup rule out of the route handler so it can be tested
       without HTTP.
How:   Linear scan over the seed list; a miss raises NotFoundError.
Who:   Called by the products route and the health probe.

The seed list is built once when the module is imported and is read-only
for the lifetime of the process, so concurrent requests need no locking.
"""

import logging
from typing import List, Sequence, Tuple

from app.exceptions import NotFoundError
from app.schemas.product import Product

logger = logging.getLogger(__name__)

SEED_PRODUCTS: Tuple[Tuple[int, str], ...] = (
    (121, "Laptop"),
    (122, "Phone"),
    (123, "Headphones"),
)


class ProductService:
    """
    Read-only product catalog.

    Responsibilities:
        - get_product(): Single product lookup with not-found handling
        - list_products(): All products in seed order
    """

    def __init__(self, seed: Sequence[Tuple[int, str]] = SEED_PRODUCTS):
        self._products: Tuple[Product, ...] = tuple(
            Product(id=product_id, name=name) for product_id, name in seed
        )
        ids = [p.id for p in self._products]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate product ids in seed: {ids}")

    def get_product(self, product_id: int) -> Product:
        """
        Return the first product whose id matches.

        Raises:
            NotFoundError: No product with the given id (→ 404)
        """
        for product in self._products:
            if product.id == product_id:
                return product

        logger.info("Product not found: id=%s", product_id)
        raise NotFoundError(resource="Product", resource_id=product_id)

    def list_products(self) -> List[Product]:
        return list(self._products)


# Singleton instance, imported by routes
product_service = ProductService()
