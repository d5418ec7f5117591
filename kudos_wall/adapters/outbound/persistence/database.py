# kudos_wall/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker

from kudos_wall.adapters.configuration.config import Settings
from kudos_wall.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


class Database:
    """
    Owns the async engine and the session factory.

    Built once by the composition root from the application settings; the
    engine connects lazily, on first use.
    """

    def __init__(self, settings: Settings):
        database_url = settings.async_database_url
        logger.info(f"Configuring database: {database_url.split('@')[-1]}")

        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=False,
            pool_size=20,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,
            pool_pre_ping=True,
        )

        self.session_factory = async_sessionmaker(
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provides an async session, committing on success and rolling back on error.

        Example:
            ```python
            async with database.session() as db:
                result = await db.execute(select(UserModel))
            ```
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables verified")

    async def dispose(self) -> None:
        await self.engine.dispose()
