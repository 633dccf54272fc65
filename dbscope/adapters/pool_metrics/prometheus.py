"""Prometheus implementation of the PoolMetrics protocol.

The gauge carries the pool's total connection count as read by the
sampler, not the number of checked-out connections.
"""

from prometheus_client import CollectorRegistry, Gauge

from dbscope.core.protocols.pool_metrics import PoolMetrics


class PrometheusPoolMetrics(PoolMetrics):
    """Prometheus-backed connection pool gauge."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

        self._active_connections = Gauge(
            "api_active_connections",
            "Number of active connections",
            registry=self._registry,
        )

    # -- PoolMetrics protocol method --

    def set_active_connections(self, count: int) -> None:
        self._active_connections.set(count)
