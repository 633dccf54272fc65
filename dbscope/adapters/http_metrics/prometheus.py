"""Prometheus implementation of the HttpMetrics protocol."""

from prometheus_client import CollectorRegistry, Histogram

from dbscope.core.logging import logger
from dbscope.core.protocols.http_metrics import HttpMetrics


class PrometheusHttpMetrics(HttpMetrics):
    """Prometheus-backed HTTP request duration histogram."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()
        self._logger = logger.with_context(component="http_metrics")

        self._request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds",
            ["method", "route", "code"],
            registry=self._registry,
        )

    # -- HttpMetrics protocol method --

    def observe_http_duration(
        self,
        method: str,
        route: str,
        status_code: str,
        duration: float,
    ) -> None:
        try:
            self._request_duration.labels(
                method=method,
                route=route,
                code=status_code,
            ).observe(duration)
        except Exception as e:
            self._logger.warning(f"Failed to record HTTP duration: {e}")
