"""Route handlers."""

from fastapi import APIRouter

from dbscope.api.endpoints import health, introspection, metrics, pool

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(introspection.router, tags=["introspection"])
api_router.include_router(pool.router, prefix="/api", tags=["pool"])
api_router.include_router(metrics.router, tags=["metrics"])

__all__ = ["api_router"]
