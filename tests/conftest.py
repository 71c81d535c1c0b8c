"""
Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from watercane.db.base import get_db, init_models
from watercane.main import app
from watercane.services.brand import BrandService
from watercane.services.product import ProductService
from watercane.services.vendor import VendorService


@pytest.fixture
async def engine():
    """In-memory database shared by every connection of one test."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
def vendor_service(session):
    """Fixture for VendorService."""
    return VendorService(session)


@pytest.fixture
def brand_service(session):
    """Fixture for BrandService."""
    return BrandService(session)


@pytest.fixture
def product_service(session):
    """Fixture for ProductService."""
    return ProductService(session)


@pytest.fixture
async def sample_vendor(vendor_service):
    return await vendor_service.create_vendor("AquaCo", "North", "1 Main St")


@pytest.fixture
async def sample_brand(brand_service, sample_vendor):
    return await brand_service.create_brand(sample_vendor.id, "SpringWater")


@pytest.fixture
async def api_client(session_factory):
    """HTTP client bound to the app, with get_db pointed at the test database."""

    async def _get_test_db():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
