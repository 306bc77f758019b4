"""
Async SQLAlchemy engine and session factory.

The engine is built lazily from settings on first use so that importing
this module never opens a connection or requires the database driver.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config.settings import Settings, config
from database.models import Base

logger = logging.getLogger(__name__)

_settings: Settings = config
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def configure_database(settings: Settings) -> None:
    """Build the engine from `settings` instead of the module-level config.

    Must run before the engine is first used; `create_app` calls it.
    """
    global _settings
    if _engine is not None and settings is not _settings:
        raise RuntimeError("Database engine already created; dispose it before reconfiguring")
    _settings = settings


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        options = {"echo": _settings.database_echo, "pool_pre_ping": True}
        if not _settings.database_url.startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20, pool_recycle=3600)
        _engine = create_async_engine(_settings.database_url, **options)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session per request; use as `Depends(get_db_session)`."""
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_models(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables that do not exist yet."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
