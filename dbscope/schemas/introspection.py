"""Schemas for the database introspection endpoints.

Rows are passed through untouched: their shape is decided by the SQL of
each endpoint, so they are typed as plain column -> value mappings.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

Row = dict[str, Any]


class TimestampResponse(BaseModel):
    """Current database server time."""

    time: datetime


class TablesResponse(BaseModel):
    """Tables in the public schema, one ``{"table_name": ...}`` row each."""

    tables: list[Row]


class TableStatisticsResponse(BaseModel):
    """Per-table ``table_name``, ``row_count`` and ``total_size`` rows."""

    statistics: list[Row]
