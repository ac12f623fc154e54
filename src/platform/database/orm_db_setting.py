"""
SQLAlchemy async engine and session management with Read-Write Separation

This module provides:
1. AsyncEngineManager: Manages separate read/write engines with event loop awareness
2. Database class (for repositories wired through the DI container)

Read-Write Separation:
- Write operations: Always use primary database
- Read operations: Use DATABASE_READ_URL / replica if configured, otherwise primary

SQLite:
- Used for local development and the test suite (sqlite+aiosqlite:///...)
- Every connection runs `PRAGMA foreign_keys=ON` so FK constraints are enforced
- Pool tuning settings are not applied; connections are not pooled
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# =============================================================================
# Engine construction
# =============================================================================


def is_sqlite_url(url: str) -> bool:
    return make_url(url).get_backend_name() == 'sqlite'


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def build_async_engine(url: str, *, pool_size: int) -> AsyncEngine:
    """Create an async engine for the given URL, applying backend-specific options."""
    if is_sqlite_url(url):
        engine = create_async_engine(url, echo=False, poolclass=NullPool)
        event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        echo=False,
        pool_size=pool_size,
        max_overflow=settings.DB_POOL_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
    )


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    """
    Manages SQLAlchemy async engines with event loop awareness.

    Ensures engines are always bound to the current event loop to prevent
    "Task got Future attached to a different loop" errors (the TestClient
    portal and pytest-asyncio each run their own loop).
    """

    def __init__(self) -> None:
        self._write_engine: Optional[AsyncEngine] = None
        self._read_engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._write_session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._read_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self, *, read_only: bool = False) -> AsyncEngine:
        """
        Get engine for current event loop, creating new one if needed

        Args:
            read_only: If True, return read engine (replica), otherwise write engine (primary)
        """
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if current_loop is not None and self._loop is not current_loop:
            if self._write_engine is not None or self._read_engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engines')
            self._reset()
            Logger.base.info(f'🔗 [DB] Creating engines for event loop {id(current_loop)}')
            self._loop = current_loop

        if read_only:
            if self._read_engine is None:
                self._read_engine = build_async_engine(
                    settings.DATABASE_READ_URL_ASYNC, pool_size=settings.DB_POOL_SIZE_READ
                )
            return self._read_engine

        if self._write_engine is None:
            self._write_engine = build_async_engine(
                settings.DATABASE_URL_ASYNC, pool_size=settings.DB_POOL_SIZE_WRITE
            )
        return self._write_engine

    def get_session_maker(self, *, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine(read_only=read_only)

        if read_only:
            if self._read_session_maker is None:
                self._read_session_maker = async_sessionmaker(
                    engine, class_=AsyncSession, expire_on_commit=False
                )
            return self._read_session_maker

        if self._write_session_maker is None:
            self._write_session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._write_session_maker

    async def dispose(self) -> None:
        """Dispose engines owned by the current loop."""
        for engine in (self._write_engine, self._read_engine):
            if engine is not None:
                await engine.dispose()
        self._reset()
        self._loop = None

    def _reset(self) -> None:
        # Engines bound to a previous loop cannot be awaited here; they are garbage collected
        self._write_engine = None
        self._read_engine = None
        self._write_session_maker = None
        self._read_session_maker = None


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine(*, read_only: bool = False) -> AsyncEngine:
    """Get event-loop-aware engine (read_only: use replica if available)"""
    return _engine_manager.get_engine(read_only=read_only)


def get_session_maker(*, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
    """Get event-loop-aware session maker (read_only: use replica if available)"""
    return _engine_manager.get_session_maker(read_only=read_only)


async def dispose_engines() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# Integer primary keys are int4 on Postgres
MAX_INTEGER_ID = 2_147_483_647


def is_storable_id(value: int) -> bool:
    """Whether `value` can name a row at all; anything else matches nothing."""
    return 1 <= value <= MAX_INTEGER_ID


# =============================================================================
# Database Class (for repositories with DI)
# =============================================================================


class Database:
    """
    Database handle for the dependency injection container.

    Delegates to AsyncEngineManager for event-loop-aware engine management
    and read-write separation support.
    """

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for database sessions (rolls back on exception)"""
        session_maker = get_session_maker(read_only=self._read_only)
        async with session_maker() as session:
            yield session
