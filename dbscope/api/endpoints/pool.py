"""Connection pool statistics endpoint."""

from fastapi import APIRouter, Depends

from dbscope.api.deps import get_pool
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.schemas.pool import PoolStats

router = APIRouter()


@router.get("/pool-stats", response_model=PoolStats)
async def pool_stats(pool: ConnectionPool = Depends(get_pool)) -> PoolStats:
    """Current pool occupancy, read from memory without a database round-trip."""
    return pool.stats()
