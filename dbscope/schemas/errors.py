"""Error response schema."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Fixed, generic error body returned on any 500."""

    error: str
