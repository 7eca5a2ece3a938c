"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support. The parcel store itself never opens
or closes sessions; callers create them from AsyncSessionLocal.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker, AsyncEngine
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create the tables registered on Base if they do not exist yet."""
    # Import models to ensure they are registered with Base
    from tracker.app.models.parcel import ParcelRecord  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)



async def get_db():
    """
    Session generator for callers of the store.

    Yields an async database session and ensures it's properly closed.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
