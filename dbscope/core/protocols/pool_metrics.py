"""PoolMetrics protocol for connection pool gauges.

The sampler depends on this protocol rather than on prometheus-client;
tests inject a fake that records the latest value in memory.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PoolMetrics(Protocol):
    """Protocol for connection pool occupancy metrics."""

    def set_active_connections(self, count: int) -> None:
        """Push the connection count from a single sampling tick."""
        ...
