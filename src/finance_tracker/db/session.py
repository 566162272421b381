"""Storage client and session dependency."""

import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import ArgumentError, DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finance_tracker.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """Process-wide storage client.

    Constructed once at startup and injected through ``app.state``. The engine
    is created on first use and reused afterwards. Without a usable URL the
    client stays unavailable. A connection that cannot be established makes
    that one session unavailable. In both cases ``session()`` yields ``None``.
    """

    def __init__(self, url: str | None, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None
        self._failed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        # Do not log SQL statement parameters outside development (can contain
        # sensitive data).
        echo = settings.db_echo if settings.app_env.lower() == "development" else False
        return cls(settings.database_url, echo=echo)

    @property
    def engine(self) -> AsyncEngine | None:
        if self._engine is None and self.url and not self._failed:
            try:
                self._engine = create_async_engine(self.url, echo=self.echo, future=True)
            except (ArgumentError, ImportError) as exc:
                logger.warning(
                    "Failed to create database engine",
                    extra={"error_type": type(exc).__name__},
                )
                self._failed = True
                return None
            self._sessionmaker = async_sessionmaker(
                self._engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._engine

    @property
    def available(self) -> bool:
        return self.engine is not None

    async def _connect(self, session: AsyncSession) -> bool:
        """Open the session's connection, reporting whether the store is reachable."""
        try:
            await session.connection()
        except (DBAPIError, OSError) as exc:
            logger.warning(
                "Failed to connect to database",
                extra={"error_type": type(exc).__name__},
            )
            return False
        return True

    async def session(self) -> AsyncIterator[AsyncSession | None]:
        if not self.available:
            yield None
            return
        async with self._sessionmaker() as session:
            if not await self._connect(session):
                yield None
                return
            yield session

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession | None]:
    """Yield a session from the application's storage client, or None."""
    database: Database = request.app.state.database
    async for session in database.session():
        yield session
