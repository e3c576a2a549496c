"""
Pytest fixtures - in-memory database, fake search index, HTTP client.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from order_service.db.base import Base
from order_service.db.models import OrderItem  # noqa: F401 - register table
from order_service.db.session import get_db
from order_service.main import app
from order_service.search.elasticsearch_client import get_elasticsearch, get_search_repository
from tests.fakes import FakeElasticsearch, InMemoryOrderItemSearchRepository

# One shared in-memory SQLite connection per test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest.fixture
def search_repo() -> InMemoryOrderItemSearchRepository:
    return InMemoryOrderItemSearchRepository()


@pytest.fixture
def fake_es() -> FakeElasticsearch:
    return FakeElasticsearch()


@pytest_asyncio.fixture
async def client(session: AsyncSession, search_repo, fake_es):
    async def override_get_db():
        yield session

    async def override_get_elasticsearch():
        return fake_es

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_elasticsearch] = override_get_elasticsearch
    app.dependency_overrides[get_search_repository] = lambda: search_repo
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def order_item_payload() -> dict:
    return {
        "order_id": 7,
        "product_id": 1001,
        "product_name": "Mechanical keyboard",
        "quantity": 2,
        "unit_price": "49.99",
    }
