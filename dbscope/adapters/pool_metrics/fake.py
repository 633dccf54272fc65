"""Fake PoolMetrics for testing.

Records the latest ``set_active_connections()`` value so tests can assert
on the gauge without reaching into prometheus-client internals.
"""


class FakePoolMetrics:
    """In-memory spy implementing the PoolMetrics protocol.

    Usage:
        fake = FakePoolMetrics()
        fake.set_active_connections(4)
        assert fake.active_connections == 4
    """

    def __init__(self) -> None:
        self.active_connections: int | None = None
        self.update_count: int = 0

    def set_active_connections(self, count: int) -> None:
        self.active_connections = count
        self.update_count += 1

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.active_connections = None
        self.update_count = 0
