"""SQLAlchemy implementation of the ConnectionPool protocol.

Wraps an async engine (asyncpg driver, ``AsyncAdaptedQueuePool``).  Each
query checks out one connection and returns it when the query finishes
or fails.  Checkouts beyond ``pool_size + max_overflow`` queue inside the
pool; ``DB_POOL_TIMEOUT`` unset means they wait indefinitely.  No
statement timeout is applied.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from dbscope.core.config import Settings
from dbscope.core.exceptions import DatabaseError
from dbscope.core.logging import logger
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.schemas.pool import PoolStats

_DRIVER_ERRORS = (
    SQLAlchemyError,
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class SqlAlchemyConnectionPool(ConnectionPool):
    """Bounded asyncpg connection pool managed by SQLAlchemy."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._engine: AsyncEngine | None = None
        self._waiting = 0
        self._logger = logger.with_context(
            component="connection_pool",
            db_host=settings.PGHOST,
            db_name=settings.PGDATABASE,
        )

    async def open(self) -> None:
        if self._engine is not None:
            return
        self._engine = create_async_engine(
            self._settings.database_url,
            pool_size=self._settings.DB_POOL_SIZE,
            max_overflow=self._settings.DB_MAX_OVERFLOW,
            pool_timeout=self._settings.DB_POOL_TIMEOUT,
        )
        self._logger.info(
            "Connection pool ready (size=%s, max_overflow=%s)",
            self._settings.DB_POOL_SIZE,
            self._settings.DB_MAX_OVERFLOW,
        )

    async def close(self) -> None:
        if self._engine is None:
            return
        engine, self._engine = self._engine, None
        await engine.dispose()
        self._logger.info("Connection pool closed")

    async def query(self, sql: str) -> list[dict[str, Any]]:
        if self._engine is None:
            raise DatabaseError("Connection pool is not open")
        try:
            async with self._checkout(self._engine) as conn:
                result = await conn.execute(text(sql))
                return [dict(row) for row in result.mappings().all()]
        except _DRIVER_ERRORS as e:
            raise DatabaseError(f"Query failed: {e}") from e

    def stats(self) -> PoolStats:
        if self._engine is None:
            return PoolStats()
        pool = self._engine.pool
        try:
            idle = max(pool.checkedin(), 0)
            checked_out = max(pool.checkedout(), 0)
        except AttributeError:
            # Pool classes without occupancy counters (NullPool, StaticPool).
            return PoolStats(waiting=self._waiting)
        return PoolStats(total=idle + checked_out, idle=idle, waiting=self._waiting)

    @asynccontextmanager
    async def _checkout(self, engine: AsyncEngine) -> AsyncIterator[AsyncConnection]:
        """Check out one connection, counting the caller as waiting until it has one."""
        self._waiting += 1
        try:
            conn = await engine.connect()
        finally:
            self._waiting -= 1
        try:
            yield conn
        finally:
            await conn.close()
