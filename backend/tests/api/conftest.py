"""API test fixtures - isolated app per test, async SQLite DB + test client.

Invariants:
    - Every test builds its own app through create_app(settings)
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - gateway_app swaps the repository for the in-memory recording fake instead
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from product_api.api.dependencies import get_product_repository
from product_api.config import Settings
from product_api.db.base import Base
from product_api.infrastructure.database import get_db
from product_api.main import create_app

TEST_ORIGIN = "http://localhost:5173"
PRODUCTS_URL = "/api/products"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        frontend_url=TEST_ORIGIN,
        log_format="text",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def client(app, test_session_factory):
    """Test client with the DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def gateway_client(app, fake_repo):
    """Test client whose routes talk to the recording in-memory gateway.

    fake_repo.builds counts how many times a route asked for a repository.
    """
    fake_repo.builds = 0

    def override_repository():
        fake_repo.builds += 1
        return fake_repo

    app.dependency_overrides[get_product_repository] = override_repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def create_product(client):
    """POST a product and return its JSON data."""
    async def _create(name: str = "Monitor", price: float = 800) -> dict:
        res = await client.post(PRODUCTS_URL, json={"name": name, "price": price})
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _create
