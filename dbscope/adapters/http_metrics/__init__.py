"""HTTP metrics adapters."""

from dbscope.adapters.http_metrics.fake import FakeHttpMetrics
from dbscope.adapters.http_metrics.prometheus import PrometheusHttpMetrics

__all__ = ["PrometheusHttpMetrics", "FakeHttpMetrics"]
