import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool

from storefront.config.settings import Settings
from storefront.models.db.base import Base

logger = logging.getLogger(__name__)


def create_async_database_engine(settings: Settings) -> AsyncEngine:
    """Crea el engine de base de datos asíncrono"""
    database_url = settings.database_url

    base_config = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,
    }

    if database_url.startswith("sqlite"):
        # SQLite: the driver's default pool, and a busy timeout so writers queue up
        logger.info("Creating async database engine for SQLite")
        engine_config = {**base_config, "connect_args": {"timeout": 30}}
    elif settings.DEBUG:
        logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
        engine_config = {**base_config, "poolclass": NullPool}
    else:
        logger.info("Creating async database engine for PRODUCTION (AsyncAdaptedQueuePool)")
        engine_config = {
            **base_config,
            "poolclass": AsyncAdaptedQueuePool,
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_timeout": settings.DB_POOL_TIMEOUT,
        }

    try:
        engine = create_async_engine(database_url, **engine_config)
    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise

    if database_url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite leaves foreign keys unchecked unless asked, per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Handle over one engine and its session factory.

    Built once per application (see storefront.core.lifecycle) and passed
    to repositories and use cases instead of a module-level engine.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_async_database_engine(settings))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager para una unidad de trabajo.

        Commits when the block exits normally, rolls back on any exception.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logger.debug(f"Rolling back session: {e!r}")
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every table known to the ORM metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
