"""Route Dependencies - builds the per-request persistence gateway.

Invariants:
    - Exactly one repository per request, bound to that request's session
    - Tests swap the gateway with app.dependency_overrides[get_product_repository]
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.repository_protocols import ProductRepository
from product_api.infrastructure.database import get_db
from product_api.infrastructure.product_repository import SqlAlchemyProductRepository


async def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlAlchemyProductRepository(db)
