"""Prometheus implementation of the MetricsRenderer protocol.

Wraps a CollectorRegistry so ``/metrics`` can serialize every registered
collector (HTTP, query, pool and process metrics) into Prometheus text
exposition format.
"""

from prometheus_client import CollectorRegistry, generate_latest

from dbscope.core.protocols.metrics_renderer import MetricsRenderer

# generate_latest() emits text format 0.0.4; newer prometheus-client
# releases point CONTENT_TYPE_LATEST at 1.0.0, so pin the header here.
_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render all metrics in a shared CollectorRegistry."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPE

    def generate(self) -> bytes:
        return generate_latest(self._registry)
