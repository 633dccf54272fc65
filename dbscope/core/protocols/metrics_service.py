"""MetricsService protocol for the metrics facade.

Abstracts the facade so ``app.state`` and endpoint dependencies rely on a
protocol rather than the concrete Prometheus-backed class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.http_metrics import HttpMetrics
from dbscope.core.protocols.pool_metrics import PoolMetrics
from dbscope.core.protocols.query_metrics import QueryMetrics


@runtime_checkable
class MetricsService(Protocol):
    """Protocol for the metrics facade.

    Public attributes (``http``, ``queries``, ``pool``) are typed with
    their respective collection protocols.
    """

    http: HttpMetrics
    queries: QueryMetrics
    pool: PoolMetrics

    @property
    def content_type(self) -> str:
        """MIME type of ``render()`` output."""
        ...

    def register_default_process_metrics(self) -> None:
        """Add process and runtime collectors to the registry."""
        ...

    def render(self) -> bytes:
        """Serialize the registry in exposition format."""
        ...

    async def start(self, *, pool: ConnectionPool, interval: float) -> None:
        """Start background samplers."""
        ...

    async def stop(self) -> None:
        """Stop all background services."""
        ...
