"""QueryMetrics protocol for database query timing."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class QueryMetrics(Protocol):
    """Protocol for database query duration metrics."""

    def observe_query_duration(self, query_type: str, duration: float) -> None:
        """Record how long one query took, successful or not.

        Args:
            query_type: Fixed label naming the query (``timestamp``, ``tables_list``, …).
            duration: Query duration in seconds.
        """
        ...
