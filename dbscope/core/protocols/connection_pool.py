"""ConnectionPool protocol for the database adapter.

Route handlers and the pool sampler only see this protocol.  Production
uses a SQLAlchemy async engine; tests inject an in-memory fake.
"""

from typing import Any, Protocol, runtime_checkable

from dbscope.schemas.pool import PoolStats


@runtime_checkable
class ConnectionPool(Protocol):
    """Bounded pool of database connections."""

    async def open(self) -> None:
        """Prepare the pool.  Connections are created on first checkout."""
        ...

    async def close(self) -> None:
        """Release every connection held by the pool."""
        ...

    async def query(self, sql: str) -> list[dict[str, Any]]:
        """Run a literal SQL statement on a checked-out connection.

        Returns:
            One column -> value dict per result row.

        Raises:
            DatabaseError: On connectivity or SQL failure.
        """
        ...

    def stats(self) -> PoolStats:
        """Return current pool occupancy.  Never raises, never blocks."""
        ...
