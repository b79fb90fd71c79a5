"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.database import Base, get_db
from app.rate_limit import limiter
from main import app

VALID_WALLET = "SP" + "A" * 39
OTHER_WALLET = "SM" + "B2" * 19


@pytest.fixture
async def test_engine(tmp_path):
    """Create test database.

    File-backed so that independent sessions (and concurrent writers) share
    one database; NullPool keeps connections from outliving their event loop.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'partners_test.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    """Create test client with a fresh session per request."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
