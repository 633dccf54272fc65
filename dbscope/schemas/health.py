"""Liveness response schema."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Static liveness payload; never touches the database."""

    status: Literal["ok"] = "ok"
