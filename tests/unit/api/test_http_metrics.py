"""Unit tests for HTTP metrics adapter and middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from dbscope.adapters.http_metrics import FakeHttpMetrics, PrometheusHttpMetrics


class TestFakeHttpMetrics:
    """Tests for the FakeHttpMetrics test helper."""

    def test_clear_resets_all_state(self):
        fake = FakeHttpMetrics()
        fake.observe_http_duration("GET", "/test", "200", 0.01)

        fake.clear()

        assert fake.requests == []


class TestPrometheusHttpMetrics:
    """Tests for the Prometheus adapter."""

    def test_registry_is_separate_from_default(self):
        """Adapter registry must not be the default global registry."""
        from prometheus_client import REGISTRY

        adapter = PrometheusHttpMetrics()
        assert adapter._registry is not REGISTRY

    def test_observe_records_histogram_sample(self):
        from prometheus_client import CollectorRegistry

        registry = CollectorRegistry()
        adapter = PrometheusHttpMetrics(registry)
        adapter.observe_http_duration("GET", "/health", "200", 0.05)
        adapter.observe_http_duration("GET", "/health", "200", 0.03)

        labels = {"method": "GET", "route": "/health", "code": "200"}
        assert registry.get_sample_value("http_request_duration_seconds_count", labels) == 2.0
        assert registry.get_sample_value(
            "http_request_duration_seconds_sum", labels
        ) == pytest.approx(0.08)

    def test_exposition_uses_method_route_code_labels(self):
        from prometheus_client import CollectorRegistry, generate_latest

        registry = CollectorRegistry()
        adapter = PrometheusHttpMetrics(registry)
        adapter.observe_http_duration("GET", "/api/tables", "500", 0.01)

        output = generate_latest(registry).decode()
        assert (
            'http_request_duration_seconds_count{code="500",method="GET",route="/api/tables"} 1.0'
            in output
        )

    def test_observe_never_raises(self):
        adapter = PrometheusHttpMetrics()
        adapter._request_duration = MagicMock()
        adapter._request_duration.labels.side_effect = RuntimeError("broken")

        adapter.observe_http_duration("GET", "/health", "200", 0.01)


class TestPrometheusQueryMetrics:
    """Tests for the Prometheus query duration adapter."""

    def test_observe_never_raises(self):
        from dbscope.adapters.query_metrics import PrometheusQueryMetrics

        adapter = PrometheusQueryMetrics()
        adapter._query_duration = MagicMock()
        adapter._query_duration.labels.side_effect = RuntimeError("broken")

        adapter.observe_query_duration("timestamp", 0.01)

        adapter._query_duration.labels.assert_called_once_with(query_type="timestamp")


class TestHttpMetricsMiddleware:
    """Tests for http_metrics_middleware using FakeHttpMetrics."""

    @pytest.fixture
    def fake_metrics(self):
        return FakeHttpMetrics()

    @pytest.fixture
    def _make_request(self, fake_metrics):
        """Factory for mock Starlette Request objects with fake metrics."""

        def factory(path: str = "/api/tables", method: str = "GET"):
            request = MagicMock()
            request.url.path = path
            request.method = method
            request.app.state.http_metrics = fake_metrics
            route = MagicMock()
            route.path = path
            request.scope = {"route": route}
            return request

        return factory

    @pytest.mark.asyncio
    async def test_records_health_endpoint(self, _make_request, fake_metrics):
        from dbscope.api.middleware import http_metrics_middleware

        request = _make_request(path="/health")
        mock_response = MagicMock()
        mock_response.status_code = 200
        call_next = AsyncMock(return_value=mock_response)

        response = await http_metrics_middleware(request, call_next)

        assert response is mock_response
        call_next.assert_awaited_once_with(request)
        assert len(fake_metrics.requests) == 1

        rec = fake_metrics.requests[0]
        assert rec.method == "GET"
        assert rec.route == "/health"
        assert rec.status_code == "200"
        assert rec.duration > 0

    @pytest.mark.asyncio
    async def test_records_500_once_when_downstream_raises(self, _make_request, fake_metrics):
        """A raising handler is recorded as a 500 and the error still propagates."""
        from dbscope.api.middleware import http_metrics_middleware

        request = _make_request(path="/api/tables", method="GET")
        call_next = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            await http_metrics_middleware(request, call_next)

        assert len(fake_metrics.requests) == 1
        assert fake_metrics.requests[0].status_code == "500"
        assert fake_metrics.requests[0].route == "/api/tables"

    @pytest.mark.asyncio
    async def test_unmatched_route_uses_fallback(self, fake_metrics):
        """When no route is matched, the route label should be 'unmatched'."""
        from dbscope.api.middleware import http_metrics_middleware

        request = MagicMock()
        request.url.path = "/random-bot-path"
        request.method = "GET"
        request.scope = {}
        request.app.state.http_metrics = fake_metrics

        mock_response = MagicMock()
        mock_response.status_code = 404
        call_next = AsyncMock(return_value=mock_response)

        await http_metrics_middleware(request, call_next)

        assert len(fake_metrics.requests) == 1
        assert fake_metrics.requests[0].route == "unmatched"
        assert fake_metrics.requests[0].status_code == "404"


class TestUnhandledExceptionHandler:
    """Tests for the terminal exception handler."""

    @pytest.mark.asyncio
    async def test_returns_generic_500(self):
        import json

        from dbscope.api.middleware import unhandled_exception_handler

        request = MagicMock()
        request.method = "GET"
        request.url.path = "/api/tables"

        response = await unhandled_exception_handler(request, ValueError("secret detail"))

        assert response.status_code == 500
        assert json.loads(response.body) == {"error": "Something broke!"}
        assert b"secret detail" not in response.body

    @pytest.mark.asyncio
    async def test_logs_unhandled_error_chained_to_original(self, caplog):
        import logging

        from dbscope.api.middleware import unhandled_exception_handler
        from dbscope.core.exceptions import UnhandledHandlerError

        request = MagicMock()
        request.method = "GET"
        request.url.path = "/api/tables"
        original = ValueError("secret detail")

        with caplog.at_level(logging.ERROR, logger="dbscope"):
            await unhandled_exception_handler(request, original)

        record = caplog.records[-1]
        logged = record.exc_info[1]
        assert isinstance(logged, UnhandledHandlerError)
        assert logged.__cause__ is original
        assert record.getMessage() == "Unhandled error in GET /api/tables"
