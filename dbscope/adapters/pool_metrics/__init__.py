"""Connection pool metrics adapters."""

from dbscope.adapters.pool_metrics.fake import FakePoolMetrics
from dbscope.adapters.pool_metrics.prometheus import PrometheusPoolMetrics

__all__ = ["PrometheusPoolMetrics", "FakePoolMetrics"]
