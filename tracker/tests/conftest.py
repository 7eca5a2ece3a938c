"""
Centralized Test Configuration.
"""

import random
import time

import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import Base, init_models
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.repositories.parcel_store import ParcelStore
from tracker.app.schemas.parcel import Parcel, now_rfc3339

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Seeded from wall-clock time so client ids differ between runs
rand_range = random.Random(time.time_ns())


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test function; tables created up front."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(engine)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    TestingSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
async def store(db_session):
    return ParcelStore(db_session)


@pytest.fixture
def random_client():
    return rand_range.randrange(10_000_000)


@pytest.fixture
def make_parcel():
    """Factory for unsaved parcels; fields can be overridden per test."""
    def _make(**overrides) -> Parcel:
        data = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": now_rfc3339(),
        }
        data.update(overrides)
        return Parcel(**data)

    return _make
