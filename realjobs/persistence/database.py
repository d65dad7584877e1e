"""Async engine and session factory for PostgreSQL (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from realjobs.config import Settings

APPLICATION_NAME = "realjobs-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Connections identify themselves as ``realjobs-api`` in
    ``pg_stat_activity`` and carry a statement timeout, so a stuck ranking
    query fails the request instead of holding a pooled connection.

    Args:
        settings: Application settings

    Returns:
        Configured async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle,
        connect_args={
            "server_settings": {
                "application_name": APPLICATION_NAME,
                "statement_timeout": str(database.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Objects stay usable after commit and nothing is flushed implicitly;
    repositories flush after each write so conflicts surface inside the
    operation that caused them.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
