"""Prometheus-backed MetricsService implementation.

Composes the metrics adapters, the renderer and the connection pool
sampler behind a single lifecycle API so the composition root (and tests)
deal with one object instead of four adapters and a background task.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import (
    CollectorRegistry,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
)

from dbscope.adapters.http_metrics import PrometheusHttpMetrics
from dbscope.adapters.metrics_renderer import PrometheusMetricsRenderer
from dbscope.adapters.pool_metrics import PrometheusPoolMetrics
from dbscope.adapters.query_metrics import PrometheusQueryMetrics
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.http_metrics import HttpMetrics
from dbscope.core.protocols.metrics_renderer import MetricsRenderer
from dbscope.core.protocols.pool_metrics import PoolMetrics
from dbscope.core.protocols.query_metrics import QueryMetrics

if TYPE_CHECKING:
    from dbscope.core.pool_sampler import ConnectionPoolSampler


class PrometheusMetricsService:
    """Prometheus-backed facade that owns all metrics adapters and the sampler.

    Satisfies the ``MetricsService`` protocol structurally.  Every adapter
    shares one ``CollectorRegistry``, separate from prometheus-client's
    global ``REGISTRY`` so that several services (e.g. in tests) can live
    in the same process.
    """

    http: HttpMetrics
    queries: QueryMetrics
    pool: PoolMetrics

    def __init__(
        self,
        http: HttpMetrics,
        queries: QueryMetrics,
        pool: PoolMetrics,
        renderer: MetricsRenderer,
        registry: CollectorRegistry | None = None,
    ) -> None:
        self.http = http
        self.queries = queries
        self.pool = pool
        self._renderer = renderer
        self._registry = registry
        self._defaults_registered = False
        self._sampler: ConnectionPoolSampler | None = None

    @classmethod
    def create(cls, registry: CollectorRegistry | None = None) -> PrometheusMetricsService:
        """Build a service with all Prometheus adapters on one registry."""
        registry = registry or CollectorRegistry()
        return cls(
            http=PrometheusHttpMetrics(registry),
            queries=PrometheusQueryMetrics(registry),
            pool=PrometheusPoolMetrics(registry),
            renderer=PrometheusMetricsRenderer(registry),
            registry=registry,
        )

    @property
    def content_type(self) -> str:
        return self._renderer.content_type

    def register_default_process_metrics(self) -> None:
        """Register process, platform and GC collectors once."""
        if self._defaults_registered or self._registry is None:
            return
        ProcessCollector(registry=self._registry)
        PlatformCollector(registry=self._registry)
        GCCollector(registry=self._registry)
        self._defaults_registered = True

    def render(self) -> bytes:
        return self._renderer.generate()

    async def start(self, *, pool: ConnectionPool, interval: float) -> None:
        """Start the connection pool sampler."""
        from dbscope.core.pool_sampler import ConnectionPoolSampler

        if self._sampler is not None:
            return
        self._sampler = ConnectionPoolSampler(pool=pool, metrics=self.pool, interval=interval)
        await self._sampler.start()

    async def stop(self) -> None:
        """Stop the sampler."""
        if self._sampler is not None:
            sampler, self._sampler = self._sampler, None
            await sampler.stop()
