"""Fake ConnectionPool for testing.

Serves canned rows keyed by a SQL fragment, or fails every query with
``DatabaseError`` to simulate an unreachable database.
"""

from __future__ import annotations

import asyncio
from typing import Any

from dbscope.core.exceptions import DatabaseError
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.schemas.pool import PoolStats


class FakeConnectionPool(ConnectionPool):
    """In-memory ConnectionPool.

    Usage:
        pool = FakeConnectionPool()
        pool.set_rows("information_schema.tables", [{"table_name": "users"}])
        rows = await pool.query(SQL)
    """

    def __init__(
        self,
        *,
        fail: bool = False,
        delay: float = 0.0,
        stats: PoolStats | None = None,
    ) -> None:
        self.fail = fail
        self.delay = delay
        self.executed: list[str] = []
        self.opened = False
        self.closed = False
        self._rows: dict[str, list[dict[str, Any]]] = {}
        self._stats = stats or PoolStats()

    async def open(self) -> None:
        self.opened = True

    async def close(self) -> None:
        self.closed = True

    async def query(self, sql: str) -> list[dict[str, Any]]:
        self.executed.append(sql)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise DatabaseError("connection refused")
        for fragment, rows in self._rows.items():
            if fragment in sql:
                return [dict(row) for row in rows]
        return []

    def stats(self) -> PoolStats:
        return self._stats

    # -- test helpers --

    def set_rows(self, fragment: str, rows: list[dict[str, Any]]) -> None:
        """Return ``rows`` for any SQL containing ``fragment``."""
        self._rows[fragment] = rows

    def set_stats(self, *, total: int = 0, idle: int = 0, waiting: int = 0) -> None:
        """Replace the snapshot returned by ``stats()``."""
        self._stats = PoolStats(total=total, idle=idle, waiting=waiting)
