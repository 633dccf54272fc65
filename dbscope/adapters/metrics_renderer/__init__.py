"""Metrics renderer adapters."""

from dbscope.adapters.metrics_renderer.fake import FakeMetricsRenderer
from dbscope.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
