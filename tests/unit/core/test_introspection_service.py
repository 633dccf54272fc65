"""Unit tests for the introspection queries and their timers."""

from datetime import datetime, timezone

import pytest

from dbscope.adapters.database import FakeConnectionPool
from dbscope.adapters.query_metrics import FakeQueryMetrics
from dbscope.core.exceptions import DatabaseError
from dbscope.core.introspection_service import (
    CURRENT_TIME_SQL,
    TABLE_STATS_SQL,
    TABLES_SQL,
    IntrospectionService,
)


@pytest.fixture
def pool():
    return FakeConnectionPool()


@pytest.fixture
def metrics():
    return FakeQueryMetrics()


@pytest.fixture
def service(pool, metrics):
    return IntrospectionService(pool, metrics)


class TestIntrospectionService:
    """Happy-path queries."""

    @pytest.mark.asyncio
    async def test_current_time(self, service, pool, metrics):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        pool.set_rows("NOW()", [{"now": now}])

        assert await service.current_time() == now
        assert pool.executed == [CURRENT_TIME_SQL]
        assert metrics.query_types() == ["timestamp"]

    @pytest.mark.asyncio
    async def test_list_tables_passes_rows_through(self, service, pool, metrics):
        pool.set_rows("information_schema.tables", [{"table_name": "users"}])

        assert await service.list_tables() == [{"table_name": "users"}]
        assert pool.executed == [TABLES_SQL]
        assert metrics.query_types() == ["tables_list"]

    @pytest.mark.asyncio
    async def test_table_stats(self, service, pool, metrics):
        rows = [{"table_name": "users", "row_count": 3, "total_size": "8192 bytes"}]
        pool.set_rows("pg_class", rows)

        assert await service.table_stats() == rows
        assert pool.executed == [TABLE_STATS_SQL]
        assert metrics.query_types() == ["table_stats"]

    def test_tables_sql_is_scoped_to_public_schema(self):
        assert "table_schema = 'public'" in TABLES_SQL


class TestIntrospectionFailures:
    """Failed queries propagate DatabaseError and are still timed."""

    @pytest.fixture
    def pool(self):
        return FakeConnectionPool(fail=True)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,query_type",
        [
            ("current_time", "timestamp"),
            ("list_tables", "tables_list"),
            ("table_stats", "table_stats"),
        ],
    )
    async def test_timer_recorded_on_failure(self, service, metrics, method, query_type):
        with pytest.raises(DatabaseError):
            await getattr(service, method)()

        assert metrics.query_types() == [query_type]
        assert metrics.queries[0].duration >= 0
