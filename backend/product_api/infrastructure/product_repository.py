"""Product Repository - SQLAlchemy implementation of the ProductRepository protocol.

Invariants:
    - One instance per request, bound to that request's AsyncSession
    - Every mutating call commits and refreshes, so the returned row reflects the
      database (generated id, timestamps)
    - find_all selects only the requested columns; excluded columns are never loaded
    - find_by_pk answers None for ids the id column cannot hold, without a query
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.domain_types import PRODUCT_ID_RANGE, ProductId
from product_api.models.product import Product


class SqlAlchemyProductRepository:
    """Persistence gateway over the products table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(
        self, *, newest_first: bool = True, exclude: Sequence[str] = (),
    ) -> list[dict]:
        columns = [
            c for c in Product.__table__.columns if c.name not in exclude
        ]
        order = Product.id.desc() if newest_first else Product.id.asc()
        result = await self._db.execute(select(*columns).order_by(order))
        return [dict(row) for row in result.mappings().all()]

    async def find_by_pk(self, product_id: ProductId) -> Product | None:
        if product_id not in PRODUCT_ID_RANGE:
            return None
        return await self._db.get(Product, product_id)

    async def create(self, name: str, price: float) -> Product:
        product = Product(name=name, price=price, availability=True)
        self._db.add(product)
        await self._db.commit()
        await self._db.refresh(product)
        return product

    async def save(self, product: Product) -> Product:
        self._db.add(product)
        await self._db.commit()
        await self._db.refresh(product)
        return product

    async def destroy(self, product: Product) -> None:
        await self._db.delete(product)
        await self._db.commit()
