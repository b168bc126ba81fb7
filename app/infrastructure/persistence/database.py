from collections.abc import Awaitable, Callable
from typing import Any

from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlalchemy.orm import DeclarativeBase

from app.infrastructure.config.settings import get_settings

settings = get_settings()


def _engine_options(database_url: str) -> dict[str, Any]:
    """Pool tuning only applies to PostgreSQL; SQLite uses a static pool."""
    if "postgresql" not in database_url:
        return {}
    return {
        "pool_size": 20,
        "max_overflow": 30,
        "pool_recycle": 3600,
        "connect_args": {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
        },
    }


# Create engine once at module level (not with lru_cache)
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    **_engine_options(settings.database_url),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


# Modern SQLAlchemy 2.0 pattern
class Base(DeclarativeBase):
    """Base class for all database models"""

    pass


async def init_models() -> None:
    """Create all tables (local development; production schemas are migrated)."""
    from app.infrastructure.persistence import models  # noqa: F401  registers tables

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


AFTER_COMMIT_KEY = "after_commit"


def add_after_commit(session: AsyncSession, callback: Callable[[], Awaitable[None]]) -> None:
    """
    Schedule work that must only happen once the session's transaction is committed
    (e.g. cache invalidation, so a concurrent reader cannot re-cache stale rows).
    """
    session.info.setdefault(AFTER_COMMIT_KEY, []).append(callback)


def discard_after_commit(session: AsyncSession) -> None:
    session.info.pop(AFTER_COMMIT_KEY, None)


async def run_after_commit(session: AsyncSession) -> None:
    """Run and clear the callbacks registered with add_after_commit()"""
    for callback in session.info.pop(AFTER_COMMIT_KEY, []):
        await callback()


async def get_db():
    """
    Database session dependency for read operations.
    Does not commit - read-only operations don't need commits.
    Write operations should use get_db_transactional().
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_db_transactional():
    """
    Database session dependency for write operations with automatic transaction management.
    - Begins transaction automatically
    - Commits on success
    - Rolls back on exception (tenant and unit writes succeed or fail together)
    - Closes session automatically

    Use this for PUT and DELETE endpoints.
    """
    async with AsyncSessionLocal() as session:
        try:
            async with session.begin():
                yield session
        except Exception:
            discard_after_commit(session)
            await session.rollback()
            raise
        await run_after_commit(session)
