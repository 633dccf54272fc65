"""Fake HttpMetrics for testing.

Records all calls in memory so tests can assert on metrics behaviour
without reaching into prometheus-client internals.
"""

from dataclasses import dataclass


@dataclass
class RequestRecord:
    """Single observed request."""

    method: str
    route: str
    status_code: str
    duration: float


class FakeHttpMetrics:
    """In-memory spy implementing the HttpMetrics protocol.

    Usage:
        fake = FakeHttpMetrics()
        # … inject into the app …
        assert len(fake.requests) == 1
    """

    def __init__(self) -> None:
        self.requests: list[RequestRecord] = []

    def observe_http_duration(
        self,
        method: str,
        route: str,
        status_code: str,
        duration: float,
    ) -> None:
        self.requests.append(RequestRecord(method, route, status_code, duration))

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.requests.clear()
