"""SQLAlchemy engine and session handle.

A ``Database`` is created once by the application lifespan and stored on
``app.state``; request handlers borrow a session from it through the
``get_db_session`` dependency. Nothing here is module-global.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from article_likes.config import Settings
from article_likes.infrastructure.database.base import Base


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _engine_options(async_url: str, timeout: float) -> dict[str, Any]:
    """Driver-level timeouts so no connection, lock or statement waits forever."""
    if async_url.startswith("sqlite"):
        # sqlite3 busy timeout: how long a writer waits for the database lock
        return {"connect_args": {"timeout": timeout}}
    if async_url.startswith("postgresql+asyncpg"):
        return {
            "pool_timeout": timeout,
            "pool_pre_ping": True,
            "connect_args": {"timeout": timeout, "command_timeout": timeout},
        }
    return {"pool_timeout": timeout, "pool_pre_ping": True}


class Database:
    """Owns the async engine and the session factory for one application."""

    def __init__(self, url: str, *, timeout: float = 30.0, echo: bool = False):
        self.url = _get_async_url(url)
        self.engine: AsyncEngine = create_async_engine(
            self.url,
            echo=echo,
            **_engine_options(self.url, timeout),
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, timeout=settings.db_timeout_seconds)

    async def create_all(self) -> None:
        """Create missing tables and indexes."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session scope — commit on success, roll back on error, always close."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
