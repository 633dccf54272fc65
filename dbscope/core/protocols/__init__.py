"""Core protocols for dependency injection."""

from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.http_metrics import HttpMetrics
from dbscope.core.protocols.metrics_renderer import MetricsRenderer
from dbscope.core.protocols.metrics_service import MetricsService
from dbscope.core.protocols.pool_metrics import PoolMetrics
from dbscope.core.protocols.query_metrics import QueryMetrics

__all__ = [
    "ConnectionPool",
    "HttpMetrics",
    "MetricsRenderer",
    "MetricsService",
    "PoolMetrics",
    "QueryMetrics",
]
