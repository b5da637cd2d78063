"""Async database engine and session factory."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models.base import Base


class DatabaseSessionManager:
    """Owns the database engine and session factory.

    One instance is created per application and handed to the stores
    that need it.

    Attributes:
        engine: SQLAlchemy async engine instance
        session_factory: Factory for creating async sessions
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 20,
        **engine_kwargs: Any,
    ) -> None:
        """Initialize database session manager.

        Args:
            database_url: Async connection URL (e.g. postgresql+asyncpg://
                or sqlite+aiosqlite://)
            pool_size: Number of persistent connections in the pool
            max_overflow: Max additional connections beyond pool_size
            **engine_kwargs: Additional arguments passed to create_async_engine
        """
        # SQLite uses its own pool classes without size settings
        if not database_url.startswith("sqlite"):
            engine_kwargs.setdefault("pool_size", pool_size)
            engine_kwargs.setdefault("max_overflow", max_overflow)
            engine_kwargs.setdefault("pool_recycle", 3600)

        self.engine: AsyncEngine = create_async_engine(
            database_url,
            pool_pre_ping=True,  # Verify connections before use
            **engine_kwargs,
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def close(self) -> None:
        """Close database engine and all connections."""
        await self.engine.dispose()

    async def ping(self) -> None:
        """Run a trivial query to check connectivity."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create all tables defined in Base metadata.

        Used for development and tests. Deployed databases are
        managed with Alembic migrations.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in Base metadata.

        WARNING: This will delete all data. Only use for testing.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
