"""Response schemas."""

from dbscope.schemas.errors import ErrorResponse
from dbscope.schemas.health import HealthResponse
from dbscope.schemas.introspection import (
    TableStatisticsResponse,
    TablesResponse,
    TimestampResponse,
)
from dbscope.schemas.pool import PoolStats

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "PoolStats",
    "TableStatisticsResponse",
    "TablesResponse",
    "TimestampResponse",
]
