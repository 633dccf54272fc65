"""Background sampler that copies connection pool occupancy into a gauge.

Runs as an asyncio task for the life of the process.  Reading pool
stats is an in-memory operation, so each tick never suspends beyond the
sleep between samples.
"""

import asyncio
from typing import Optional

from dbscope.core.logging import logger
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.pool_metrics import PoolMetrics

DEFAULT_INTERVAL: float = 5.0


class ConnectionPoolSampler:
    """Periodically pushes ``pool.stats().total`` to ``PoolMetrics``."""

    def __init__(
        self,
        pool: ConnectionPool,
        metrics: PoolMetrics,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        self._pool = pool
        self._metrics = metrics
        self._interval = interval
        self._task: Optional[asyncio.Task] = None
        self._logger = logger.with_context(component="pool_sampler")

    async def start(self) -> None:
        """Spawn the sampling task.  A second call is a no-op."""
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._run(), name="connection-pool-sampler")
        self._logger.info(f"Connection pool sampler started (interval={self._interval}s)")

    async def stop(self) -> None:
        """Cancel the sampling task; safe to call when never started."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self._logger.info("Connection pool sampler stopped")

    def sample(self) -> None:
        """Take one sample now."""
        self._metrics.set_active_connections(self._pool.stats().total)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.sample()
            except Exception as e:
                self._logger.warning(f"Failed to sample connection pool: {e}")
