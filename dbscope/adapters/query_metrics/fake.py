"""Fake QueryMetrics for testing."""

from dataclasses import dataclass


@dataclass
class QueryRecord:
    """Single timed query."""

    query_type: str
    duration: float


class FakeQueryMetrics:
    """In-memory spy implementing the QueryMetrics protocol."""

    def __init__(self) -> None:
        self.queries: list[QueryRecord] = []

    def observe_query_duration(self, query_type: str, duration: float) -> None:
        self.queries.append(QueryRecord(query_type, duration))

    # -- test helpers --

    def query_types(self) -> list[str]:
        """Labels of every recorded query, in order."""
        return [q.query_type for q in self.queries]

    def clear(self) -> None:
        """Reset all recorded state."""
        self.queries.clear()
