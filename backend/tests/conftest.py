"""Root conftest - shared test configuration and an in-memory product gateway.

Invariants:
    - Tests never reach a real PostgreSQL: DATABASE_URL defaults to SQLite
    - InMemoryProductRepository satisfies ProductRepository and records every call,
      so tests can assert that no persistence call happened
"""

import os
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class FakeProduct:
    id: int
    name: str
    price: float
    availability: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


class InMemoryProductRepository:
    """ProductRepository backed by a dict, with a call log."""

    def __init__(self):
        self.rows: dict[int, FakeProduct] = {}
        self.calls: list[tuple[str, object]] = []
        self._next_id = 1

    def seed(self, name: str, price: float, availability: bool = True) -> FakeProduct:
        product = FakeProduct(self._next_id, name, price, availability)
        self.rows[product.id] = product
        self._next_id += 1
        return product

    async def find_all(self, *, newest_first=True, exclude=()):
        self.calls.append(("find_all", tuple(exclude)))
        ordered = sorted(self.rows.values(), key=lambda p: p.id, reverse=newest_first)
        return [
            {k: v for k, v in asdict(p).items() if k not in exclude}
            for p in ordered
        ]

    async def find_by_pk(self, product_id):
        self.calls.append(("find_by_pk", product_id))
        return self.rows.get(product_id)

    async def create(self, name, price):
        self.calls.append(("create", name))
        return self.seed(name, price)

    async def save(self, product):
        self.calls.append(("save", product.id))
        product.updated_at = _now()
        self.rows[product.id] = product
        return product

    async def destroy(self, product):
        self.calls.append(("destroy", product.id))
        self.rows.pop(product.id, None)


@pytest.fixture
def fake_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()
