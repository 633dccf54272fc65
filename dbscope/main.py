"""Composition root and entry point for the dbscope API.

``create_app`` is the only place that builds process-wide state: the
connection pool and the metrics service are created here, stored on
``app.state``, and handed to everything that needs them.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI

from dbscope import __version__
from dbscope.adapters.database import SqlAlchemyConnectionPool
from dbscope.api.endpoints import api_router
from dbscope.api.middleware import http_metrics_middleware, unhandled_exception_handler
from dbscope.core.config import Settings
from dbscope.core.config import settings as default_settings
from dbscope.core.logging import configure_logging, logger
from dbscope.core.metrics_service import PrometheusMetricsService
from dbscope.core.protocols.connection_pool import ConnectionPool
from dbscope.core.protocols.metrics_service import MetricsService


def create_app(
    *,
    settings: Optional[Settings] = None,
    pool: Optional[ConnectionPool] = None,
    metrics: Optional[MetricsService] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings; defaults to the environment-derived ones.
        pool: Connection pool; defaults to a SQLAlchemy/asyncpg pool.
        metrics: Metrics facade; defaults to Prometheus on a fresh registry.

    Returns:
        The configured application.  Startup (pool open, process metrics,
        sampler) happens in the lifespan handler.
    """
    settings = settings or default_settings
    pool = pool or SqlAlchemyConnectionPool(settings)
    metrics = metrics or PrometheusMetricsService.create()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.LOG_LEVEL, local=settings.LOCAL_DEVELOPMENT)
        metrics.register_default_process_metrics()
        await pool.open()
        await metrics.start(pool=pool, interval=settings.POOL_SAMPLE_INTERVAL)
        logger.info(f"API running on port {settings.PORT}")
        try:
            yield
        finally:
            try:
                await metrics.stop()
            finally:
                await pool.close()

    app = FastAPI(title="dbscope", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.pool = pool
    app.state.metrics = metrics
    app.state.http_metrics = metrics.http

    app.middleware("http")(http_metrics_middleware)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(api_router)

    return app


def main() -> None:
    """Run the API with uvicorn."""
    configure_logging(default_settings.LOG_LEVEL, local=default_settings.LOCAL_DEVELOPMENT)
    uvicorn.run(
        create_app(),
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
