"""Database session management for async PostgreSQL.

A ``Database`` owns one async engine and its session maker. The application
builds two from ``Settings``: the regular one and a privileged one bound to
the service role credential, which bypasses row-level security and must only
ever be reachable from server-side admin routes.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel

from collab.core.config import Settings
from collab.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Database:
    """Async engine plus session maker for one connection URL.

    Args:
        url: SQLAlchemy async connection URL.
        echo: Log emitted SQL.
        pool_size: Connection pool size (ignored for SQLite).
        max_overflow: Extra connections allowed beyond the pool (ignored for SQLite).
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 20,
    ) -> None:
        self._url = url
        self._echo = echo
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the regular, policy-checked database."""
        return cls(
            settings.database_url,
            echo=settings.debug,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    @classmethod
    def service_role(cls, settings: Settings) -> "Database":
        """Build the privileged database used by admin routes.

        Raises:
            ConfigurationError: If no service role URL is configured.
        """
        if settings.service_role_database_url is None:
            raise ConfigurationError("Missing database URL or service role credential")

        return cls(
            settings.service_role_database_url.get_secret_value(),
            echo=settings.debug,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    @property
    def safe_url(self) -> str:
        """Connection URL with the password masked, for logging."""
        return make_url(self._url).render_as_string(hide_password=True)

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the async database engine."""
        if self._engine is None:
            logger.info(f"Creating async database engine: {self.safe_url}")

            options: dict = {"echo": self._echo, "pool_pre_ping": True}
            if not self._url.startswith("sqlite"):
                options["pool_size"] = self._pool_size
                options["max_overflow"] = self._max_overflow

            try:
                self._engine = create_async_engine(self._url, **options)
            except Exception as e:
                logger.error(f"Failed to create database engine: {e}", exc_info=True)
                raise

            logger.info("Database engine created successfully")

        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the async session maker."""
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

        return self._session_maker

    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session, rolling back if the caller fails.

        Example:
            ```python
            async for session in database.session():
                result = await session.execute(select(User))
            ```
        """
        async with self.session_maker() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                logger.error(f"Database error: {e}", exc_info=True)
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                raise

    async def create_all_tables(self) -> None:
        """Create all database tables.

        In production the schema is managed by migrations; this exists for
        local development and tests.
        """
        # Import models to ensure they're registered with SQLModel metadata
        from collab.db import models  # noqa: F401

        logger.info("Creating database tables...")

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        logger.info("Database tables created successfully")

    async def drop_all_tables(self) -> None:
        """Drop all database tables.

        WARNING: This will delete all data. Use with caution,
        typically only in test environments.
        """
        logger.warning("Dropping all database tables...")

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

        logger.warning("All database tables dropped")

    async def close(self) -> None:
        """Close the engine and all pooled connections."""
        if self._engine is not None:
            logger.info("Closing database engine...")
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None
            logger.info("Database engine closed")
