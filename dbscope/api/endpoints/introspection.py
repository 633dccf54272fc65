"""Database introspection endpoints.

Every handler runs one fixed query.  On ``DatabaseError`` the error is
logged server-side and the caller gets a fixed message and a 500; no
SQL or driver detail is ever returned.
"""

from typing import Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dbscope.api.deps import get_introspection_service
from dbscope.core.exceptions import DatabaseError
from dbscope.core.introspection_service import IntrospectionService
from dbscope.core.logging import logger
from dbscope.schemas.errors import ErrorResponse
from dbscope.schemas.introspection import (
    TableStatisticsResponse,
    TablesResponse,
    TimestampResponse,
)

router = APIRouter()

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def _database_failure(route: str, message: str, exc: DatabaseError) -> JSONResponse:
    logger.with_context(route=route).error(f"{message}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.get("/db-test", response_model=TimestampResponse, responses=_ERROR_RESPONSES)
async def db_test(
    service: IntrospectionService = Depends(get_introspection_service),
) -> Union[TimestampResponse, JSONResponse]:
    """Return the database server's current time."""
    try:
        now = await service.current_time()
    except DatabaseError as e:
        return _database_failure("/db-test", "Database connection failed", e)
    return TimestampResponse(time=now)


@router.get("/api/tables", response_model=TablesResponse, responses=_ERROR_RESPONSES)
async def list_tables(
    service: IntrospectionService = Depends(get_introspection_service),
) -> Union[TablesResponse, JSONResponse]:
    """List the tables of the public schema."""
    try:
        rows = await service.list_tables()
    except DatabaseError as e:
        return _database_failure("/api/tables", "Failed to get tables", e)
    return TablesResponse(tables=rows)


@router.get(
    "/api/table-stats",
    response_model=TableStatisticsResponse,
    responses=_ERROR_RESPONSES,
)
async def table_stats(
    service: IntrospectionService = Depends(get_introspection_service),
) -> Union[TableStatisticsResponse, JSONResponse]:
    """Row count and total size of every user table."""
    try:
        rows = await service.table_stats()
    except DatabaseError as e:
        return _database_failure("/api/table-stats", "Failed to get table statistics", e)
    return TableStatisticsResponse(statistics=rows)
