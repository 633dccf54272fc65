"""Shared fixtures: an app wired to a fake pool and a real Prometheus registry."""

import httpx
import pytest
import pytest_asyncio
from prometheus_client import CollectorRegistry

from dbscope.adapters.database import FakeConnectionPool
from dbscope.core.config import Settings
from dbscope.core.metrics_service import PrometheusMetricsService
from dbscope.main import create_app


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def metrics_service(registry) -> PrometheusMetricsService:
    return PrometheusMetricsService.create(registry)


@pytest.fixture
def fake_pool() -> FakeConnectionPool:
    return FakeConnectionPool()


@pytest.fixture
def settings() -> Settings:
    return Settings(POOL_SAMPLE_INTERVAL=0.01, LOCAL_DEVELOPMENT=True)


@pytest.fixture
def app(settings, fake_pool, metrics_service):
    return create_app(settings=settings, pool=fake_pool, metrics=metrics_service)


@pytest_asyncio.fixture
async def client(app):
    # The terminal exception handler answers with a 500, after which
    # Starlette re-raises for the server to log; keep that out of tests.
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
