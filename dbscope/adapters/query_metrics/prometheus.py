"""Prometheus implementation of the QueryMetrics protocol.

Uses a caller-supplied CollectorRegistry so query timings are served
alongside the HTTP metrics on the same ``/metrics`` endpoint.
"""

from prometheus_client import CollectorRegistry, Histogram

from dbscope.core.logging import logger
from dbscope.core.protocols.query_metrics import QueryMetrics


class PrometheusQueryMetrics(QueryMetrics):
    """Prometheus-backed database query duration histogram."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()
        self._logger = logger.with_context(component="query_metrics")

        self._query_duration = Histogram(
            "db_query_duration_seconds",
            "Duration of database queries in seconds",
            ["query_type"],
            registry=self._registry,
        )

    # -- QueryMetrics protocol method --

    def observe_query_duration(self, query_type: str, duration: float) -> None:
        try:
            self._query_duration.labels(query_type=query_type).observe(duration)
        except Exception as e:
            self._logger.warning(f"Failed to record query duration: {e}")
