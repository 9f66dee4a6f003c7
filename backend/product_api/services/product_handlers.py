"""Product Handlers - one coroutine per product operation, run after the request rules pass.

Invariants:
    - Handlers receive an already-validated id and typed body; they never re-check input
    - Read-single and mutating handlers look the row up first and raise
      ProductNotFoundError when it is absent
    - Persistence faults are not caught here; they propagate to the global handlers
    - No locking: update and toggle are read-then-write and race with concurrent
      writers on the same row
"""

import logging

from product_api.core.domain_types import (
    PRODUCT_DELETED_MESSAGE, TIMESTAMP_FIELDS, ProductId,
)
from product_api.core.errors import ProductNotFoundError
from product_api.core.repository_protocols import ProductLike, ProductRepository
from product_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


async def get_product_or_404(
    repo: ProductRepository, product_id: ProductId,
) -> ProductLike:
    """Fetch by primary key or raise ProductNotFoundError."""
    product = await repo.find_by_pk(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


async def list_products(repo: ProductRepository) -> list[dict]:
    """All products, newest id first, without timestamps."""
    return await repo.find_all(newest_first=True, exclude=TIMESTAMP_FIELDS)


async def get_product(
    repo: ProductRepository, product_id: ProductId,
) -> ProductLike:
    return await get_product_or_404(repo, product_id)


async def create_product(
    repo: ProductRepository, payload: ProductCreate,
) -> ProductLike:
    product = await repo.create(name=payload.name, price=payload.price)
    logger.info(
        f"Product created: {product.name}", extra={"product_id": product.id},
    )
    return product


async def update_product(
    repo: ProductRepository, product_id: ProductId, payload: ProductUpdate,
) -> ProductLike:
    """Full replacement of name, price and availability."""
    product = await get_product_or_404(repo, product_id)
    product.name = payload.name
    product.price = payload.price
    product.availability = payload.availability
    product = await repo.save(product)
    logger.info("Product updated", extra={"product_id": product.id})
    return product


async def toggle_availability(
    repo: ProductRepository, product_id: ProductId,
) -> ProductLike:
    """Flip the stored availability flag. Request body is ignored."""
    product = await get_product_or_404(repo, product_id)
    product.availability = not product.availability
    product = await repo.save(product)
    logger.info(
        f"Product availability set to {product.availability}",
        extra={"product_id": product.id},
    )
    return product


async def delete_product(
    repo: ProductRepository, product_id: ProductId,
) -> str:
    product = await get_product_or_404(repo, product_id)
    await repo.destroy(product)
    logger.info("Product deleted", extra={"product_id": product_id})
    return PRODUCT_DELETED_MESSAGE
