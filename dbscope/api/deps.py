"""Dependencies for route handlers.

Everything is read from ``app.state``, populated once by ``create_app``.
"""

from fastapi import Depends, Request

from dbscope.core.introspection_service import IntrospectionService
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.metrics_service import MetricsService


def get_pool(request: Request) -> ConnectionPool:
    """Connection pool owned by the application."""
    return request.app.state.pool


def get_metrics(request: Request) -> MetricsService:
    """Metrics facade owned by the application."""
    return request.app.state.metrics


def get_introspection_service(
    pool: ConnectionPool = Depends(get_pool),
    metrics: MetricsService = Depends(get_metrics),
) -> IntrospectionService:
    """Introspection queries bound to the application pool and query metrics."""
    return IntrospectionService(pool, metrics.queries)
