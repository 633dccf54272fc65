"""Health check endpoint."""

from fastapi import APIRouter

from dbscope.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check if the API is up.  Never touches the database."""
    return HealthResponse()
