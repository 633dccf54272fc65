"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Depends, Response

from dbscope.api.deps import get_metrics
from dbscope.core.protocols.metrics_service import MetricsService

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def scrape_metrics(metrics: MetricsService = Depends(get_metrics)) -> Response:
    """Render every registered collector in text exposition format."""
    return Response(content=metrics.render(), media_type=metrics.content_type)
