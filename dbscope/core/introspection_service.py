"""Read-only database introspection queries.

Each method runs one fixed statement and times it under a fixed
``query_type`` label.  The timer is observed whether the query succeeds
or fails.
"""

import time
from datetime import datetime
from typing import Any

from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.query_metrics import QueryMetrics

CURRENT_TIME_SQL = "SELECT NOW()"

TABLES_SQL = """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = 'public'
"""

TABLE_STATS_SQL = """
    SELECT
        C.relname AS table_name,
        COALESCE(S.n_live_tup, 0) AS row_count,
        pg_size_pretty(pg_total_relation_size(C.oid)) AS total_size
    FROM pg_class C
    LEFT JOIN pg_namespace N ON (N.oid = C.relnamespace)
    LEFT JOIN pg_stat_user_tables S ON (S.relid = C.oid)
    WHERE nspname NOT IN ('pg_catalog', 'information_schema')
    AND C.relkind = 'r'
"""


class QueryType:
    """Label values for ``db_query_duration_seconds``."""

    TIMESTAMP = "timestamp"
    TABLES_LIST = "tables_list"
    TABLE_STATS = "table_stats"


class IntrospectionService:
    """Runs the introspection queries against a connection pool."""

    def __init__(self, pool: ConnectionPool, metrics: QueryMetrics) -> None:
        self._pool = pool
        self._metrics = metrics

    async def current_time(self) -> datetime:
        """Database server time (``NOW()``).

        Raises:
            DatabaseError: If the query fails.
        """
        rows = await self._timed_query(QueryType.TIMESTAMP, CURRENT_TIME_SQL)
        return rows[0]["now"]

    async def list_tables(self) -> list[dict[str, Any]]:
        """Tables in the ``public`` schema."""
        return await self._timed_query(QueryType.TABLES_LIST, TABLES_SQL)

    async def table_stats(self) -> list[dict[str, Any]]:
        """Live row count and total on-disk size of every user table."""
        return await self._timed_query(QueryType.TABLE_STATS, TABLE_STATS_SQL)

    async def _timed_query(self, query_type: str, sql: str) -> list[dict[str, Any]]:
        start = time.perf_counter()
        try:
            return await self._pool.query(sql)
        finally:
            self._metrics.observe_query_duration(query_type, time.perf_counter() - start)
