"""Response bodies shared by the HTTP routes."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(description="Human readable message")
    request_id: str | None = Field(default=None, description="Correlation id of the request")
    details: list[dict[str, Any]] | None = Field(
        default=None, description="Per-field problems for malformed requests"
    )


class StatusResponse(BaseModel):
    status: str
