"""Connection pool snapshot schema."""

from pydantic import BaseModel, Field


class PoolStats(BaseModel):
    """Point-in-time read of connection pool occupancy.

    Attributes:
        total: Connections currently open, idle or checked out.
        idle: Open connections sitting in the pool.
        waiting: Checkout requests that have not been handed a connection yet.
    """

    total: int = Field(default=0, ge=0)
    idle: int = Field(default=0, ge=0)
    waiting: int = Field(default=0, ge=0)

    @property
    def active(self) -> int:
        """``total - idle - waiting``, floored at zero."""
        return max(self.total - self.idle - self.waiting, 0)
