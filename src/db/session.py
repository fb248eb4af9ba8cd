"""Async SQLAlchemy engine, session dependency and table setup."""
import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import get_settings
from models.base import Base


logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def create_tables() -> None:
    """Create any missing tables from model metadata. Existing tables are left as-is."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Ensured tables: %s", ", ".join(sorted(Base.metadata.tables)))


async def dispose_engine() -> None:
    """Close all pooled connections."""
    await engine.dispose()


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """
    Yield an async database session for one request.

    Services only flush(); the commit happens once here when the request
    finishes, and any exception rolls the whole request back.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
