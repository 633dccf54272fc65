"""Database query metrics adapters."""

from dbscope.adapters.query_metrics.fake import FakeQueryMetrics
from dbscope.adapters.query_metrics.prometheus import PrometheusQueryMetrics

__all__ = ["PrometheusQueryMetrics", "FakeQueryMetrics"]
