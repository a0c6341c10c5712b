"""
Relational database connection handle built on SQLAlchemy's asyncio engine
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from product_api.core.errors import ErrorResponse
from product_api.core.logger import logger
from product_api.models.product import Base


class Database:
    """
    Owns the engine and session factory for one database.

    The handle is created explicitly and handed to the application;
    ``connect`` and ``close`` bracket its lifetime.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self):
        """Create the engine, verify connectivity and create missing tables"""
        if self.is_connected:
            return

        logger.info("Connecting to database...")

        try:
            self.engine = create_async_engine(self.url, echo=self.echo, **self.engine_kwargs)
            self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(Base.metadata.create_all)

            logger.info(
                "Successfully connected to database",
                metadata={"event": "database_connected", "dialect": self.engine.dialect.name}
            )
        except SQLAlchemyError as e:
            logger.error(
                f"Could not connect to database: {e}",
                metadata={"event": "database_connection_error"}
            )
            await self.close()
            raise ErrorResponse(f"Could not connect to database: {e}", status_code=503)

    async def close(self):
        """Dispose of the engine and its connection pool"""
        if self.engine is not None:
            logger.info("Closing database connection...")
            await self.engine.dispose()
        self.engine = None
        self.session_factory = None

    async def ping(self) -> bool:
        """Return True when a trivial query succeeds"""
        if not self.is_connected:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}", metadata={"event": "database_ping_failed"})
            return False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session for a single unit of work"""
        if self.session_factory is None:
            await self.connect()
        async with self.session_factory() as session:
            yield session

    async def reset(self):
        """Drop and recreate every table"""
        if not self.is_connected:
            await self.connect()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables recreated", metadata={"event": "database_reset"})
