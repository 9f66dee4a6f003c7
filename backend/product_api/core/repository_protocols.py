"""Boundary Protocols - contract between product handlers and persistence.

Invariants:
    - Handlers depend on ProductRepository only, never on the ORM session directly
    - Implementations are provided per request via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no inheritance
"""

from typing import Protocol, Sequence

from product_api.core.domain_types import ProductId


class ProductLike(Protocol):
    """Structural contract for a persisted product row."""
    id: int
    name: str
    price: float
    availability: bool


class ProductRepository(Protocol):
    """Persistence gateway for the products table."""

    async def find_all(
        self, *, newest_first: bool = True, exclude: Sequence[str] = (),
    ) -> list[dict]: ...

    async def find_by_pk(self, product_id: ProductId) -> ProductLike | None: ...

    async def create(self, name: str, price: float) -> ProductLike: ...

    async def save(self, product: ProductLike) -> ProductLike: ...

    async def destroy(self, product: ProductLike) -> None: ...
