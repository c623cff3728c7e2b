"""SQLAlchemy database engine, session factory and per-request session dependency."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from jsonstore.config import Settings
from jsonstore.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_database_url(url: str, auth_token: str = "") -> URL:
    """Resolve the async driver URL, using ``auth_token`` as the password of a remote target."""
    resolved = make_url(_get_async_url(url))
    if auth_token and resolved.get_backend_name() != "sqlite":
        resolved = resolved.set(password=auth_token)
    return resolved


class Database:
    """Owns the long-lived engine (connection pool) and hands out sessions.

    One instance is created by the application factory and stored on
    ``app.state``; nothing else opens connections.
    """

    def __init__(self, url: str, *, auth_token: str = "", echo: bool = False):
        self.url = build_database_url(url, auth_token)
        self.engine: AsyncEngine = create_async_engine(self.url, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            auth_token=settings.database_auth_token,
            echo=settings.database_echo,
        )

    @property
    def backend_name(self) -> str:
        return self.url.get_backend_name()

    async def create_tables(self) -> None:
        """Create the records table if it does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database ready (%s)", self.url.render_as_string(hide_password=True))

    async def ping(self) -> None:
        """Lightweight connectivity check. Raises on error."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency — the Database owned by the running application."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    async with get_database(request).session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
