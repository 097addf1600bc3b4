"""Async PostgreSQL engine and sessions for the accounts store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gate.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: Connection URL and pool sizing
        echo: Log every statement (debug mode)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Sessions never autoflush; repositories flush after each write so the
    transaction manager decides what is committed.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
