"""Async engine and session factory for the Postgres identity store."""

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pod.config import Settings
from pod.util.error import ConfigurationError

SUPPORTED_DRIVER = "postgresql+asyncpg"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the URL is malformed or not an asyncpg URL
    """
    try:
        url = make_url(settings.database_url)
    except ArgumentError as e:
        raise ConfigurationError("database.url", str(e)) from e
    if url.drivername != SUPPORTED_DRIVER:
        raise ConfigurationError(
            "database.url",
            f"expected a {SUPPORTED_DRIVER} URL, got {url.drivername}",
        )

    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are mapped to frozen domain models right away, so nothing needs
    # to stay attached after commit
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
